"""Okta Management API client library.

Read-only subset of the Okta API needed to resolve users, groups and
memberships.

Architecture:
- client.py: HTTP client with SSWS token auth and Link-header pagination
- users.py: User search and user group memberships
- groups.py: Group search and group members
- exceptions.py: Typed exceptions for error handling

Usage:
    from okta_rbac.core.okta import create_client, UserService

    client = create_client("dev-123456.okta.com", "00abc...")
    users = UserService(client).find_users_by_login("alice@test.com")
"""
from .client import (
    OktaClient,
    create_client,
    org_url_from_domain,
    escape_search_value,
    REQUEST_TIMEOUT,
    DEFAULT_PAGE_LIMIT,
)
from .exceptions import (
    OktaError,
    OktaAPIError,
    OktaRateLimitError,
)
from .users import UserService
from .groups import GroupService

__all__ = [
    # Client
    "OktaClient",
    "create_client",
    "org_url_from_domain",
    "escape_search_value",
    "REQUEST_TIMEOUT",
    "DEFAULT_PAGE_LIMIT",
    
    # Exceptions
    "OktaError",
    "OktaAPIError",
    "OktaRateLimitError",
    
    # Services
    "UserService",
    "GroupService",
]
