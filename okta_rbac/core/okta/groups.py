"""Okta group lookups."""
from __future__ import annotations
import logging
from typing import List

from .client import OktaClient, escape_search_value

logger = logging.getLogger(__name__)


class GroupService:
    """Read-only access to Okta groups."""
    
    def __init__(self, client: OktaClient):
        """Initialize group service.
        
        Args:
            client: Okta client
        """
        self.client = client
    
    def find_groups_by_name(self, name: str) -> List[dict]:
        """Return every group whose profile.name equals ``name`` exactly.
        
        Uses the search expression rather than the ``q`` parameter, which
        is a prefix match and would return "Admins" for "Admin".
        
        Args:
            name: Group display name
            
        Returns:
            Raw group representations
        """
        expr = f'profile.name eq "{escape_search_value(name)}"'
        groups = self.client.get_all("/api/v1/groups", params={"search": expr})
        logger.debug("Group search %r returned %d match(es)", name, len(groups))
        return groups
    
    def list_group_users(self, group_id: str) -> List[dict]:
        """Retrieve all members of a group, every page included.
        
        Members are returned regardless of status; disabled and suspended
        accounts stay in their groups.
        
        Args:
            group_id: Okta group ID
            
        Returns:
            Raw user representations, in directory order
        """
        return self.client.get_all(f"/api/v1/groups/{group_id}/users")
