import logging

from authguard.models.user import UserProfile

logger = logging.getLogger("authguard.stores.memory")


class InMemoryUserStore:
    """
    Dict-backed user store for development and tests.
    Contents live as long as the instance.
    """

    def __init__(self):
        self._users: dict[str, UserProfile] = {}

    async def add_user(self, user: UserProfile) -> UserProfile:
        self._users[user.id] = user
        return user

    async def find_user_by_id(self, user_id: str) -> UserProfile | None:
        return self._users.get(user_id)

    async def clear(self) -> None:
        self._users.clear()
        logger.info("InMemoryUserStore: all users cleared")
