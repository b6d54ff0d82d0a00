"""Lock-guarded, file-backed game store.

Every operation takes the same lock, so all reads and writes happen in one
total order. Mutations save the whole table to disk before releasing the
lock; when the save fails the in-memory table is rolled back and the
PersistenceError is re-raised, so memory never runs ahead of the file.
"""

import logging
import threading
from typing import List, Optional

from numguess.models import GameRecord
from numguess.persistence import JsonFilePersistence, PersistenceError
from numguess.services.games import apply_guess, start_game
from numguess.store import GameTable


class GameNotFound(Exception):
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"game {game_id} not found")


class GuardedGameStore:
    def __init__(self, table: GameTable, persistence: JsonFilePersistence, logger=None, rng=None):
        self._table = table
        self._persistence = persistence
        self._lock = threading.Lock()
        self.logger = logger or logging.getLogger(__name__)
        self.rng = rng

    @classmethod
    def from_path(cls, path, logger=None, rng=None) -> 'GuardedGameStore':
        persistence = JsonFilePersistence(path, logger=logger)
        return cls(persistence.load(), persistence, logger=logger, rng=rng)

    def _commit(self, previous: GameTable) -> None:
        # Caller holds the lock
        try:
            self._persistence.save(self._table)
        except PersistenceError as exc:
            self._table = previous
            self.logger.error(f"[persist-fail] {exc}; in-memory state rolled back")
            raise

    def create(self, game_id: int) -> GameRecord:
        with self._lock:
            previous = self._table.snapshot()
            if game_id in self._table:
                self.logger.warning(f"[create] game={game_id} already exists, overwriting")
            record = start_game(game_id, rng=self.rng)
            self._table.insert(record)
            self._commit(previous)
            self.logger.info(f"[create] game={game_id}")
            return record.copy()

    def guess(self, game_id: int, value: int) -> GameRecord:
        with self._lock:
            current = self._table.get(game_id)
            if current is None:
                raise GameNotFound(game_id)
            previous = self._table.snapshot()
            record = apply_guess(current, value)
            self._table.update(record)
            self._commit(previous)
            self.logger.info(f"[guess] game={game_id} value={value} hint={record.hint} status={record.status}")
            return record.copy()

    def get(self, game_id: int) -> Optional[GameRecord]:
        with self._lock:
            return self._table.get(game_id)

    def list_games(self) -> List[GameRecord]:
        with self._lock:
            return sorted(self._table.get_all(), key=lambda r: r.id)

    def count(self) -> int:
        with self._lock:
            return len(self._table)

    def delete(self, game_id: int) -> bool:
        with self._lock:
            if game_id not in self._table:
                return False
            previous = self._table.snapshot()
            self._table.delete(game_id)
            self._commit(previous)
            self.logger.info(f"[delete] game={game_id}")
            return True

    def reset(self) -> int:
        with self._lock:
            removed = len(self._table)
            previous = self._table.snapshot()
            self._table.clear()
            self._commit(previous)
            self.logger.info(f"[reset] removed {removed} game(s)")
            return removed
