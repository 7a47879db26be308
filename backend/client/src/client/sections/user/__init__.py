from client.sections.user.page import PAGE_LIMIT, UserPage, UserPageState, UserPageView

__all__ = ["PAGE_LIMIT", "UserPage", "UserPageState", "UserPageView"]
