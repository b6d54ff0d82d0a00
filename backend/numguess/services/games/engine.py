import random
from dataclasses import replace

from numguess.models import (
    GameRecord,
    HINT_CORRECT,
    HINT_START,
    HINT_TOO_HIGH,
    HINT_TOO_LOW,
    SECRET_MAX,
    SECRET_MIN,
    STATUS_IN_PROGRESS,
    STATUS_WON,
)


def start_game(game_id: int, rng=None) -> GameRecord:
    """Build a fresh game with a secret drawn uniformly from [1, 100].

    `rng` is anything with a random.Random-style randint(); defaults to the
    module-level generator.
    """
    rng = rng or random
    return GameRecord(
        id=game_id,
        secret=rng.randint(SECRET_MIN, SECRET_MAX),
        last_guess=0,
        hint=HINT_START,
        status=STATUS_IN_PROGRESS,
    )


def apply_guess(record: GameRecord, value: int) -> GameRecord:
    """Return the record as it stands after guessing `value`.

    Any integer is accepted. A won game stays won.
    """
    if value < record.secret:
        return replace(record, last_guess=value, hint=HINT_TOO_LOW)
    if value > record.secret:
        return replace(record, last_guess=value, hint=HINT_TOO_HIGH)
    return replace(record, last_guess=value, hint=HINT_CORRECT, status=STATUS_WON)
