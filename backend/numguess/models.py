from numguess import db


class User(db.Model):
    """A player, created lazily by their first scored guess."""
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(), unique=True, nullable=False, index=True)
    has_attempted = db.Column(db.Boolean, default=False, nullable=False)
    accumulated_reward = db.Column(db.Integer, default=0, nullable=False)

    def to_leaderboard_entry(self):
        return {
            'name': self.name,
            'accumulatedReward': self.accumulated_reward,
        }

    def __repr__(self):
        return f'<User {self.name!r} reward={self.accumulated_reward}>'
