"""Key-value secret storage for the admin password and the sample cache."""

from pihole_monitor.secrets.base import SecretStore, SecretStoreError
from pihole_monitor.secrets.credentials import CredentialProvider
from pihole_monitor.secrets.file import FileSecretStore
from pihole_monitor.secrets.memory import InMemorySecretStore

__all__ = [
    "CredentialProvider",
    "FileSecretStore",
    "InMemorySecretStore",
    "SecretStore",
    "SecretStoreError",
]
