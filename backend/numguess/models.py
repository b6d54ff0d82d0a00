from dataclasses import dataclass, replace

STATUS_IN_PROGRESS = 'in_progress'
STATUS_WON = 'won'
STATUSES = (STATUS_IN_PROGRESS, STATUS_WON)

HINT_START = 'Guess a number between 1 and 100'
HINT_TOO_LOW = 'Too low!'
HINT_TOO_HIGH = 'Too high!'
HINT_CORRECT = 'Correct!'

MAX_GAME_ID = 2 ** 64 - 1
SECRET_MIN = 1
SECRET_MAX = 100


@dataclass
class GameRecord:
    id: int
    secret: int
    last_guess: int = 0
    hint: str = HINT_START
    status: str = STATUS_IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self.status == STATUS_WON

    def copy(self) -> 'GameRecord':
        return replace(self)

    def to_dict(self, include_secret=False):
        data = {
            'id': self.id,
            'last_guess': self.last_guess,
            'hint': self.hint,
            'status': self.status,
        }
        if include_secret:
            data['secret'] = self.secret
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'GameRecord':
        """Rebuild a record from its persisted shape.

        Raises KeyError/TypeError/ValueError on malformed input so the loader
        can decide what to do with a bad snapshot.
        """
        status = data.get('status', STATUS_IN_PROGRESS)
        if status not in STATUSES:
            raise ValueError(f"unknown status {status!r}")
        hint = data.get('hint', HINT_START)
        if not isinstance(hint, str):
            raise ValueError(f"hint must be a string, got {hint!r}")
        game_id = _strict_int(data['id'], 'id')
        if not 0 <= game_id <= MAX_GAME_ID:
            raise ValueError(f"id {game_id} is not an unsigned 64-bit integer")
        secret = _strict_int(data['secret'], 'secret')
        if not SECRET_MIN <= secret <= SECRET_MAX:
            raise ValueError(f"secret {secret} outside [{SECRET_MIN}, {SECRET_MAX}]")
        return cls(
            id=game_id,
            secret=secret,
            last_guess=_strict_int(data.get('last_guess', 0), 'last_guess'),
            hint=hint,
            status=status,
        )


def _strict_int(value, field):
    # bool is an int subclass; floats and numeric strings are not accepted either
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    return value
