from typing import Dict, List, Optional

from numguess.models import GameRecord


class GameTable:
    """In-memory mapping of game id -> GameRecord.

    Records go in and come out as copies; nothing outside the table holds a
    reference to a stored record. Not thread-safe on its own, see
    numguess.guarded.GuardedGameStore.
    """

    def __init__(self, games: Optional[Dict[int, GameRecord]] = None):
        self._games: Dict[int, GameRecord] = {}
        for record in (games or {}).values():
            self.insert(record)

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id) -> bool:
        return game_id in self._games

    def insert(self, record: GameRecord) -> None:
        self._games[record.id] = record.copy()

    def get(self, game_id: int) -> Optional[GameRecord]:
        record = self._games.get(game_id)
        return record.copy() if record is not None else None

    def get_all(self) -> List[GameRecord]:
        return [r.copy() for r in self._games.values()]

    def update(self, record: GameRecord) -> None:
        # Overwrite, not merge
        self.insert(record)

    def delete(self, game_id: int) -> None:
        self._games.pop(game_id, None)

    def clear(self) -> None:
        self._games.clear()

    def snapshot(self) -> 'GameTable':
        return GameTable(self._games)

    def to_dict(self) -> dict:
        # JSON object keys are strings
        return {
            'games': {
                str(game_id): record.to_dict(include_secret=True)
                for game_id, record in self._games.items()
            }
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GameTable':
        games = data['games']
        if not isinstance(games, dict):
            raise ValueError("'games' must be an object")
        table = cls()
        for key, fields in games.items():
            record = GameRecord.from_dict(fields)
            if int(key) != record.id:
                raise ValueError(f"key {key!r} does not match record id {record.id}")
            table.insert(record)
        return table
