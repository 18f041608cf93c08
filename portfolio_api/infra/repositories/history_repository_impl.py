import json
import os
import threading
from typing import List

from pydantic import TypeAdapter, ValidationError

from portfolio_api.domain.errors import StorageError
from portfolio_api.domain.models.portfolio import HistoryEntry
from portfolio_api.domain.repositories.history_repository import HistoryRepository
from portfolio_api.utils.logger import logger

_history_adapter = TypeAdapter(List[HistoryEntry])

# Serializes load-modify-store across all instances; the factory builds one per request.
_write_lock = threading.Lock()


class JsonFileHistoryRepository(HistoryRepository):
    """History stored as a pretty-printed JSON array in a single file."""

    def __init__(self, file_path: str, limit: int = 50):
        self.file_path = file_path
        self.limit = limit

    def load(self) -> List[HistoryEntry]:
        try:
            with open(self.file_path, 'rb') as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f'Unable to read history file {self.file_path}: {e}') from e

        try:
            return _history_adapter.validate_python(json.loads(raw.decode('utf-8')))
        except (ValueError, ValidationError):
            logger.warning(f'History file {self.file_path} is not a valid history, treating it as empty')
            return []

    def append(self, entry: HistoryEntry) -> None:
        with _write_lock:
            try:
                history = self.load()
                history.insert(0, entry)
                del history[self.limit:]
                self._save(history)
            except (StorageError, OSError) as e:
                logger.error(f'Error saving history: {e}', {'entry_id': entry.id})

    def _save(self, history: List[HistoryEntry]) -> None:
        """Rewrite the whole file, replacing it atomically."""
        payload = [item.model_dump(by_alias=True, exclude_none=True) for item in history]
        directory = os.path.dirname(os.path.abspath(self.file_path))
        os.makedirs(directory, exist_ok=True)

        tmp_path = f'{self.file_path}.tmp'
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.file_path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
