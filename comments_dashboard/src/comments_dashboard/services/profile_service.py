"""
Controller for the read-only profile view.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger

from ..api import APIError, PlaceholderAPIClient
from ..config import get_settings
from ..models import UserRecord
from .loading import LoadGeneration


@dataclass(frozen=True)
class ProfileView:
    """Everything the profile page displays, already formatted."""

    initials: str
    name: str
    email: str
    welcome_text: str
    fields: List[Tuple[str, str]]


def initials_for(name: str) -> str:
    """First letter of each word of ``name``: "Ervin Howell" -> "EH"."""
    return "".join(part[0] for part in name.split())


def build_profile_view(user: UserRecord) -> ProfileView:
    return ProfileView(
        initials=initials_for(user.name),
        name=user.name,
        email=user.email,
        welcome_text=f"Welcome, {user.name}",
        fields=[
            ("User ID", str(user.id)),
            ("Name", user.name),
            ("Email ID", user.email),
            ("Address", f"{user.address.street}, {user.address.city}"),
            ("Phone", user.phone),
        ],
    )


class ProfileController:
    """
    Fetches the user list and exposes the user at a fixed position.
    
    Unlike a silent failure, a failed load sets ``error`` so the page can
    show it instead of loading forever.
    """
    
    def __init__(self, api_client: PlaceholderAPIClient, user_index: Optional[int] = None):
        """
        Args:
            api_client: Client used to fetch the users
            user_index: Position of the displayed user in the response
        """
        self.api_client = api_client
        self.user_index = get_settings().profile_user_index if user_index is None else user_index
        self.user: Optional[UserRecord] = None
        self.loading = True
        self.error: Optional[str] = None
        self._generation = LoadGeneration()
    
    async def load(self) -> None:
        """Fetch the users and publish the selected one."""
        token = self._generation.begin()
        self.loading = True
        self.error = None
        logger.info("Fetching users")
        
        try:
            users = await self.api_client.get_users()
            if not 0 <= self.user_index < len(users):
                raise APIError(
                    f"Failed to fetch user: response has {len(users)} users, "
                    f"no user at position {self.user_index}"
                )
        except APIError as e:
            if not self._generation.is_current(token):
                logger.debug(f"Discarding failure of superseded users load #{token}")
                return
            logger.error(f"Error fetching user: {e.message}")
            self.user = None
            self.error = e.message
            self.loading = False
            return
        
        if not self._generation.is_current(token):
            logger.debug(f"Discarding result of superseded users load #{token}")
            return
        
        self.user = users[self.user_index]
        self.loading = False
        logger.info(f"Loaded profile for user {self.user.id}")
    
    def cancel(self) -> None:
        """Drop any in-flight load; called when the profile page is left."""
        self._generation.invalidate()
    
    def profile(self) -> Optional[ProfileView]:
        if self.user is None:
            return None
        return build_profile_view(self.user)
