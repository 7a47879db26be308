"""API routes package.

Routers are organized by domain and registered in main.py with the /api prefix:

- health: Health check endpoint
- stripe: Stripe Connect account linking
"""

from api.routes.health import router as health_router
from api.routes.stripe import router as stripe_router

__all__ = [
    "health_router",
    "stripe_router",
]
