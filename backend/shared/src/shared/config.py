"""Runtime settings read from environment variables.

Values are read when ``get_settings()`` is first called and cached for the
process lifetime. Tests call ``get_settings.cache_clear()`` after patching
the environment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_URL = "http://localhost:9000/api"
# Upload widget target; only its completion matters, the image itself is
# sent base64 encoded with the hostListing mutation.
DEFAULT_IMAGE_UPLOAD_URL = "https://www.mocky.io/v2/5cc8019d300000980a055e76"
STRIPE_CONNECT_AUTHORIZE_URL = "https://connect.stripe.com/oauth/authorize"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration."""

    environment: str
    api_url: str
    image_upload_url: str
    stripe_client_id: str | None
    stripe_secret_key: str | None
    request_timeout: float

    @property
    def stripe_secret_key_parameter(self) -> str:
        """SSM parameter holding the Stripe secret key for this environment."""
        return f"/tinyhouse/{self.environment}/stripe/secret_key"

    @property
    def stripe_connect_url(self) -> str | None:
        """Stripe OAuth authorize URL the profile page links to, if configured."""
        if not self.stripe_client_id:
            return None
        return (
            f"{STRIPE_CONNECT_AUTHORIZE_URL}?response_type=code"
            f"&client_id={self.stripe_client_id}&scope=read_write"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build Settings from the environment (cached)."""
    return Settings(
        environment=os.environ.get("ENVIRONMENT", "dev"),
        api_url=os.environ.get("TINYHOUSE_API_URL", DEFAULT_API_URL),
        image_upload_url=os.environ.get("IMAGE_UPLOAD_URL", DEFAULT_IMAGE_UPLOAD_URL),
        stripe_client_id=os.environ.get("STRIPE_CLIENT_ID") or None,
        stripe_secret_key=os.environ.get("S_SECRET_KEY") or None,
        request_timeout=float(os.environ.get("TINYHOUSE_REQUEST_TIMEOUT", "30")),
    )
