class GameError(Exception):
    """Base for failures reported to clients as ``{"error": message}``."""
    status_code = 400
    message = 'Invalid input'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidInput(GameError):
    status_code = 400
    message = 'Invalid input'


class OutOfRange(GameError):
    status_code = 400
    message = 'Guesses must be between 00 and 99'


class AlreadyAttempted(GameError):
    status_code = 403
    message = 'You have already made your one allowed attempt'


class InternalError(GameError):
    # Public message stays generic; details go to the server log only
    status_code = 500
    message = 'Server error'
