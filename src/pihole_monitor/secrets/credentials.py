"""Admin password lookup for refresh cycles."""

from typing import Optional

import structlog

from pihole_monitor.api.exceptions import CredentialError
from pihole_monitor.secrets.base import SecretStore, SecretStoreError

log = structlog.get_logger(__name__)


class CredentialProvider:
    """Reads the admin password from the secret store.

    Falls back to a configured password when the store holds none. The
    credential is only read, never logged and never written by a refresh.
    """

    def __init__(
        self,
        store: SecretStore,
        key: str = "pihole_admin_password_v1",
        fallback: Optional[str] = None,
    ) -> None:
        self.store = store
        self.key = key
        self.fallback = fallback or None

    def get(self) -> str:
        """Return the credential for one authentication attempt.

        Raises:
            CredentialError: Neither the store nor the fallback has a password.
        """
        try:
            if self.store.has(self.key):
                secret = self.store.get(self.key)
                if secret.strip():
                    return secret
        except (SecretStoreError, KeyError) as e:
            log.warning("credential_store_unreadable", error=str(e))

        if self.fallback:
            return self.fallback
        raise CredentialError()

    def is_available(self) -> bool:
        """True when get() would return a credential."""
        try:
            self.get()
        except CredentialError:
            return False
        return True

    def set(self, secret: str) -> None:
        """Store a new password.

        Raises:
            ValueError: The password is empty or whitespace.
            SecretStoreError: The store could not be written.
        """
        if not secret or not secret.strip():
            raise ValueError("Password must not be empty")
        self.store.set(self.key, secret)
        log.info("credential_stored", key=self.key)

    def reset(self) -> None:
        """Remove the stored password. Idempotent."""
        try:
            self.store.remove(self.key)
            log.info("credential_removed", key=self.key)
        except SecretStoreError as e:
            log.warning("credential_remove_failed", error=str(e))
