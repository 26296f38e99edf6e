"""
Port (interface) for secret stores used to bootstrap provider credentials.
Infrastructure adapters (e.g. SecretsManagerAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISecretStore(ABC):
    @abstractmethod
    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a secret by ARN or name."""
        ...

    @abstractmethod
    def load_into_env(self, secret_id: str, override: bool = False) -> list[str]:
        """Copy the secret's key-value pairs into the process environment.

        Variables that are already set are left alone unless *override* is true.
        Returns the names of the variables that were set.
        """
        ...
