"""Client sections, one per page or page region."""

from client.sections.app_header import AppHeader, SearchBar
from client.sections.host import Host, HostState
from client.sections.stripe import StripeConnect, StripeConnectState
from client.sections.user import UserPage, UserPageState

__all__ = [
    "AppHeader",
    "Host",
    "HostState",
    "SearchBar",
    "StripeConnect",
    "StripeConnectState",
    "UserPage",
    "UserPageState",
]
