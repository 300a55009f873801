"""File-backed secret store with atomic writes for crash-safe persistence."""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Union

import structlog

from pihole_monitor.secrets.base import SecretStoreError

log = structlog.get_logger(__name__)


class FileSecretStore:
    """Stores secrets as one JSON object in a file readable only by its owner.

    Every write replaces the whole file through a temp file + rename in the
    same directory, so a reader sees either the old or the new content.
    """

    FILE_MODE = 0o600

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file (created on first write)
        """
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SecretStoreError(f"Secret store {self.path} is corrupted: {e}") from e
        except OSError as e:
            raise SecretStoreError(f"Cannot read secret store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SecretStoreError(f"Secret store {self.path} is not a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        content = json.dumps(data, indent=2, sort_keys=True) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=".tmp-secrets-",
                suffix=".json",
            )
        except OSError as e:
            raise SecretStoreError(f"Cannot write secret store {self.path}: {e}") from e

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(temp_path, self.FILE_MODE)
            # Atomic rename (same filesystem)
            os.replace(temp_path, self.path)
        except OSError as e:
            Path(temp_path).unlink(missing_ok=True)
            raise SecretStoreError(f"Cannot write secret store {self.path}: {e}") from e

        log.debug("secret_store_written", path=str(self.path), keys=len(data))

    def has(self, key: str) -> bool:
        return key in self._read()

    def get(self, key: str) -> str:
        return self._read()[key]

    def set(self, key: str, secret: str) -> None:
        data = self._read()
        data[key] = secret
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
