"""Viewer model: the client's view of the signed in session."""

from typing import Optional

from pydantic import Field

from .base import RemoteModel


class Viewer(RemoteModel):
    """The currently signed in user, or an anonymous session.

    Every field is optional since an anonymous viewer has none of them.
    """

    id: Optional[str] = Field(default=None, description="User ID")
    token: Optional[str] = Field(default=None, description="CSRF token for the session")
    avatar: Optional[str] = Field(default=None, description="Avatar image URL")
    has_wallet: Optional[bool] = Field(
        default=None, description="Whether the viewer has connected a Stripe account"
    )
    did_request: bool = Field(
        default=False, description="Whether the sign in request has completed"
    )

    @property
    def is_signed_in(self) -> bool:
        return self.id is not None
