"""Okta user lookups."""
from __future__ import annotations
import logging
from typing import List

from .client import OktaClient, escape_search_value

logger = logging.getLogger(__name__)


class UserService:
    """Read-only access to Okta users."""
    
    def __init__(self, client: OktaClient):
        """Initialize user service.
        
        Args:
            client: Okta client
        """
        self.client = client
    
    def find_users_by_login(self, login: str) -> List[dict]:
        """Return every user whose profile.login equals ``login``.
        
        The search API returns a list, so callers decide what zero or
        several matches mean.
        
        Args:
            login: User login (usually an email address)
            
        Returns:
            Raw user representations
        """
        expr = f'profile.login eq "{escape_search_value(login)}"'
        users = self.client.get_all("/api/v1/users", params={"search": expr})
        logger.debug("User search %r returned %d match(es)", login, len(users))
        return users
    
    def list_user_groups(self, user_id: str) -> List[dict]:
        """Return all groups the user is a member of.
        
        Args:
            user_id: Okta user ID
            
        Returns:
            Raw group representations, in directory order
        """
        return self.client.get_all(f"/api/v1/users/{user_id}/groups")
