"""View descriptions shared by the client sections.

``render()`` methods return these frozen models; the UI shell turns them
into markup and follows ``Redirect`` views.
"""

import math

from pydantic import BaseModel, ConfigDict


class View(BaseModel):
    model_config = ConfigDict(frozen=True)


class Redirect(View):
    """Navigate to ``to`` instead of rendering anything."""

    to: str


class Spinner(View):
    tip: str


class ErrorBanner(View):
    message: str = "Uh oh! Something went wrong :("
    description: str
    dismissible: bool = False


class PageSkeleton(View):
    paragraphs: int = 3


def format_listing_price(price: int, round_: bool = True) -> str:
    """Format a price in cents as dollars, e.g. 12000 -> "$120"."""
    dollars = price / 100
    if round_:
        return f"${math.floor(dollars + 0.5)}"
    return f"${dollars:g}"
