"""SSM Parameter Store access for server secrets.

The Stripe secret key lives at ``/tinyhouse/<environment>/stripe/secret_key``
as a SecureString. Local development can skip SSM entirely by setting
``S_SECRET_KEY``.
"""

import logging
import os
from functools import lru_cache

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class SSMServiceError(Exception):
    """Raised when SSM parameter retrieval fails."""


class SSMService:
    """Reads decrypted SecureString parameters, caching them per instance.

    Usage:
        ssm = get_ssm_service()
        secret_key = ssm.get_parameter("/tinyhouse/dev/stripe/secret_key")
    """

    def __init__(self, region: str | None = None) -> None:
        self._region = region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1")
        self._client = boto3.client("ssm", region_name=self._region)
        self._cache: dict[str, str] = {}

    def get_parameter(self, name: str, *, use_cache: bool = True) -> str:
        """Retrieve a parameter value.

        Args:
            name: Full parameter path.
            use_cache: Return a previously fetched value if present.

        Returns:
            The decrypted parameter value.

        Raises:
            SSMServiceError: If the parameter cannot be retrieved.
        """
        if use_cache and name in self._cache:
            return self._cache[name]

        logger.info("Fetching SSM parameter: %s", name)
        try:
            response = self._client.get_parameter(Name=name, WithDecryption=True)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code == "ParameterNotFound":
                raise SSMServiceError(f"SSM parameter not found: {name}") from e
            if error_code == "AccessDeniedException":
                raise SSMServiceError(
                    f"Access denied to SSM parameter: {name}. "
                    "Check IAM permissions for ssm:GetParameter."
                ) from e
            raise SSMServiceError(f"Failed to retrieve SSM parameter {name}: {e}") from e

        value = response["Parameter"]["Value"]
        self._cache[name] = value
        return value

    def clear_cache(self) -> None:
        self._cache.clear()


@lru_cache(maxsize=1)
def get_ssm_service() -> SSMService:
    """Get the shared SSMService instance."""
    return SSMService()
