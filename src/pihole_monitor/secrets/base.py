"""Secret store interface."""

from typing import Protocol, runtime_checkable


class SecretStoreError(Exception):
    """Raised when the backing storage cannot be read or written."""

    pass


@runtime_checkable
class SecretStore(Protocol):
    """Opaque string storage keyed by name.

    ``get`` raises KeyError for unknown keys; ``remove`` of an unknown key
    is a no-op. Storage failures raise SecretStoreError.
    """

    def has(self, key: str) -> bool: ...

    def get(self, key: str) -> str: ...

    def set(self, key: str, secret: str) -> None: ...

    def remove(self, key: str) -> None: ...
