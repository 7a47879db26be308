"""Pytest configuration and fixtures for TinyHouse backend tests.

This module provides reusable fixtures for testing:
- Environment defaults and service singleton resets
- A mocked GraphQL client plus the client collaborators (history, notifications, viewer)
- Sample user page data in the API's camelCase shape
"""

import os
from typing import Any, Generator
from unittest.mock import MagicMock

import pytest

# === Environment Setup ===

os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("ENVIRONMENT", "dev")

# Only set fake credentials for moto if no real credentials are present
if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

VIEWER_ID = "5d378db94e84753160e08b55"
OTHER_USER_ID = "5d378db94e84753160e08b57"


# === Singleton Reset ===


@pytest.fixture(autouse=True)
def reset_services_between_tests() -> Generator[None, None, None]:
    """Clear cached settings and service singletons around each test."""
    from api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Client Fixtures ===


@pytest.fixture
def graphql_client() -> MagicMock:
    """Mock GraphQL client; set ``execute.return_value`` or ``side_effect`` per test."""
    from shared.services.graphql_client import GraphQLClient

    client = MagicMock(spec=GraphQLClient)
    client.execute.return_value = {}
    return client


@pytest.fixture
def notifier():
    from client.notifications import NotificationCenter

    return NotificationCenter()


@pytest.fixture
def history():
    from client.navigation import History

    return History("/")


@pytest.fixture
def viewer_context():
    """Signed in viewer with a connected Stripe account."""
    from client.context import ViewerContext
    from shared.models.viewer import Viewer

    return ViewerContext(
        Viewer(
            id=VIEWER_ID,
            token="csrf-token-abc",
            avatar="https://res.cloudinary.com/tinyhouse/image/upload/avatar.png",
            has_wallet=True,
            did_request=True,
        )
    )


# === Sample Data Fixtures ===


@pytest.fixture
def sample_listing() -> dict[str, Any]:
    return {
        "id": "5d378db94e84753160e08b31",
        "title": "Clean and fully furnished apartment. 5 min away from CN Tower",
        "image": "https://res.cloudinary.com/tinyhouse/image/upload/cntower.jpg",
        "address": "3210 Scotchmere Dr W, Toronto, ON, CA",
        "price": 10000,
        "numOfGuests": 2,
    }


@pytest.fixture
def sample_user_data(sample_listing: dict[str, Any]) -> dict[str, Any]:
    """Response ``data`` of the user query for the viewer's own page."""
    return {
        "user": {
            "id": VIEWER_ID,
            "name": "James J.",
            "avatar": "https://res.cloudinary.com/tinyhouse/image/upload/james.png",
            "contact": "james@tinyhouse.com",
            "hasWallet": True,
            "income": 723796,
            "bookings": {
                "total": 1,
                "result": [
                    {
                        "id": "5daa530eefc64b001767247c",
                        "listing": sample_listing,
                        "checkIn": "2019-10-29",
                        "checkOut": "2019-10-31",
                    }
                ],
            },
            "listings": {"total": 1, "result": [sample_listing]},
        }
    }
