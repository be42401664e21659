import re
from typing import Optional, Sequence, Tuple

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from numguess import db
from numguess.models import User
from .errors import AlreadyAttempted, InternalError, InvalidInput, OutOfRange
from .reward import compute_reward

_INTEGER_TEXT = re.compile(r'^\s*[+-]?\d+\s*$', re.ASCII)

MIN_GUESS = 0
MAX_GUESS = 99


def parse_guess(raw) -> int:
    """Coerce a raw request value to an int, or raise InvalidInput.

    Accepts ints, integral floats and decimal-digit strings. Booleans,
    fractions and anything else non-numeric are rejected.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidInput()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise InvalidInput()
    if isinstance(raw, str) and _INTEGER_TEXT.match(raw):
        return int(raw)
    raise InvalidInput()


def format_guess(value: int) -> str:
    return f'{value:02d}'


def validate_submission(name, raw_guess1, raw_guess2) -> Tuple[str, str]:
    """Run the request checks in order and return both guesses zero-padded."""
    if not isinstance(name, str) or not name:
        raise InvalidInput()
    values = (parse_guess(raw_guess1), parse_guess(raw_guess2))
    if any(v < MIN_GUESS or v > MAX_GUESS for v in values):
        raise OutOfRange()
    return format_guess(values[0]), format_guess(values[1])


def create_scored_user(name: str, reward: int) -> User:
    """Insert a first-time player already marked as attempted.

    Losing an insert race on the unique name means someone else scored
    this name first.
    """
    user = User(name=name, has_attempted=True, accumulated_reward=reward)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise AlreadyAttempted()
    return user


def claim_attempt(name: str, reward: int) -> bool:
    """Flip has_attempted and add the reward in one conditional UPDATE.

    Returns False when the row was already attempted (or is gone); nothing
    is committed in that case.
    """
    claimed = db.session.execute(
        update(User)
        .where(User.name == name, User.has_attempted == False)  # noqa: E712
        .values(has_attempted=True, accumulated_reward=User.accumulated_reward + reward)
        .execution_options(synchronize_session=False)
    )
    if claimed.rowcount != 1:
        db.session.rollback()
        return False
    db.session.commit()
    return True


def _leaderboard_query():
    # Ties go to the earliest stored player
    return User.query.order_by(User.accumulated_reward.desc(), User.id.asc())


def _find_master_user() -> Optional[dict]:
    leader = _leaderboard_query().first()
    return leader.to_leaderboard_entry() if leader else None


def submit_guess(name, raw_guess1, raw_guess2, expected: Sequence[str]) -> dict:
    """Score the one allowed attempt for ``name`` and persist it.

    Raises InvalidInput or OutOfRange before touching the database,
    AlreadyAttempted if the name has been scored before, and
    InternalError for any database failure.
    """
    guess1, guess2 = validate_submission(name, raw_guess1, raw_guess2)
    try:
        user = User.query.filter_by(name=name).first()
        if user is not None and user.has_attempted:
            raise AlreadyAttempted()

        result = compute_reward(guess1, guess2, expected)
        if user is None:
            user = create_scored_user(name, result.reward)
        elif not claim_attempt(name, result.reward):
            raise AlreadyAttempted()
        db.session.refresh(user)
        accumulated = user.accumulated_reward
        master_user = _find_master_user()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[guess-error] name={name!r} database failure")
        raise InternalError()

    current_app.logger.info(
        f"[guess] name={name!r} guesses={guess1},{guess2} reward={result.reward} reason={result.reason!r}"
    )
    return {
        'reward': result.reward,
        'reason': result.reason,
        'accumulatedReward': accumulated,
        'masterUser': master_user,
        'expectedNumbers': list(expected),
    }


def get_leaderboard(expected: Sequence[str]) -> dict:
    """Read-only snapshot: leader, every player by descending reward, target pair."""
    try:
        users = _leaderboard_query().all()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("[leaderboard-error] database failure")
        raise InternalError()
    entries = [u.to_leaderboard_entry() for u in users]
    return {
        'masterUser': entries[0] if entries else None,
        'allUsers': entries,
        'expectedNumbers': list(expected),
    }
