import json
import logging
import os

from numguess.store import GameTable


class PersistenceError(Exception):
    """Writing the game snapshot to disk failed."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to write {path}: {cause}")


class JsonFilePersistence:
    """Whole-store JSON snapshot at a single file path.

    save() writes the whole table to a sibling temp file and swaps it over
    the real one, so a failed write leaves the previous snapshot in place.
    """

    def __init__(self, path, logger=None):
        self.path = os.fspath(path)
        self.tmp_path = self.path + '.tmp'
        self.logger = logger or logging.getLogger(__name__)

    def save(self, table: GameTable) -> None:
        data = json.dumps(table.to_dict())
        try:
            with open(self.tmp_path, 'w', encoding='utf-8') as f:
                f.write(data)
            os.replace(self.tmp_path, self.path)
        except OSError as exc:
            try:
                os.remove(self.tmp_path)
            except OSError:
                pass
            raise PersistenceError(self.path, exc) from exc

    def load(self) -> GameTable:
        if not os.path.exists(self.path):
            self.logger.info(f"[load] {self.path} not found, starting with an empty store")
            return GameTable()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            table = GameTable.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            self.logger.warning(f"[load] could not read {self.path} ({exc}), starting with an empty store")
            return GameTable()
        self.logger.info(f"[load] restored {len(table)} game(s) from {self.path}")
        return table
