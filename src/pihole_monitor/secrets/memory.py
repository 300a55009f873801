"""Dict-backed secret store."""

from typing import Dict, Optional


class InMemorySecretStore:
    """SecretStore kept in process memory (tests, embedding)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> str:
        return self._data[key]

    def set(self, key: str, secret: str) -> None:
        self._data[key] = secret

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
