"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

load_into_env() is called once by the exporter entrypoint, before settings are
read, when ALPHA_VANTAGE_SECRET_ARN is set. Values already present in the
environment (e.g. from a local .env) win over the stored secret.
"""

import json
import logging
import os

import boto3

from src.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SecretsManagerAdapter(ISecretStore):
    """Fetches and deserializes secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None) -> None:
        self._client = boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def get_secret(self, secret_id: str) -> dict:
        """Fetch and deserialize a JSON secret by ARN or name."""
        response = self._client.get_secret_value(SecretId=secret_id)
        return json.loads(response["SecretString"])

    def load_into_env(self, secret_id: str, override: bool = False) -> list[str]:
        """Inject the key-value pairs of a JSON secret into os.environ.

        Returns:
            Names of the variables that were set.
        """
        loaded = []
        for key, value in self.get_secret(secret_id).items():
            if not override and os.environ.get(key):
                continue
            os.environ[key] = str(value)
            loaded.append(key)
        logger.info("Loaded %d variable(s) from secret store", len(loaded))
        return loaded
