"""FastAPI dependency providers for shared services.

Services are built lazily by their ``lru_cache`` factories in shared.services
and handed to routes through ``Depends``. Tests override them with
``app.dependency_overrides``.

Usage in routes:
    from api.dependencies import get_stripe

    @router.post("/stripe/connect")
    async def connect(stripe_service: StripeService = Depends(get_stripe)):
        ...
"""

from shared.services.stripe_service import StripeService, get_stripe_service


def get_stripe() -> StripeService:
    """Get the shared StripeService instance."""
    return get_stripe_service()


def reset_services() -> None:
    """Clear cached service instances (call between tests)."""
    from shared.config import get_settings
    from shared.services.ssm_service import get_ssm_service

    get_stripe_service.cache_clear()
    get_ssm_service.cache_clear()
    get_settings.cache_clear()
