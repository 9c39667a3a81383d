"""Okta-backed role manager.

Answers role-inheritance queries from an authorization engine (Casbin's
``RoleManager`` method set) by reading users, groups and memberships from
the Okta directory. Roles are Okta groups identified by name, subjects are
Okta users identified by login.

Nothing is cached: each query re-reads the directory, and any failing
sub-lookup fails the whole query.

Usage:
    from okta_rbac import attach_to_enforcer, new_role_manager

    rm = new_role_manager("dev-123456.okta.com", "00abc...")
    rm.has_link("alice@test.com", "Everyone")   # True
    rm.get_users("Admin")                       # ["bob@test.com"]

    attach_to_enforcer(enforcer, rm)            # pycasbin
"""
from __future__ import annotations
import logging
from typing import Any, List, Protocol, TYPE_CHECKING

from .errors import (
    AmbiguousResultError,
    DomainNotSupportedError,
    GroupNotFoundError,
    OperationNotSupportedError,
    UserNotFoundError,
)
from .okta import GroupService, OktaClient, UserService, create_client, REQUEST_TIMEOUT
from .records import DirectoryGroup, DirectoryUser

if TYPE_CHECKING:
    from okta_rbac.config.settings import AppConfig

logger = logging.getLogger(__name__)


class RoleManager(Protocol):
    """Role manager contract invoked by the authorization engine.
    
    Any resolver (local graph, directory-backed, hybrid) exposing these
    methods can be handed to the engine.
    """
    
    def clear(self) -> None: ...
    
    def add_link(self, name1: str, name2: str, *domain: str) -> None: ...
    
    def delete_link(self, name1: str, name2: str, *domain: str) -> None: ...
    
    def has_link(self, name1: str, name2: str, *domain: str) -> bool: ...
    
    def get_roles(self, name: str, *domain: str) -> List[str]: ...
    
    def get_users(self, name: str, *domain: str) -> List[str]: ...
    
    def print_roles(self) -> None: ...
    
    def get_domains(self, name: str) -> List[str]: ...
    
    def get_all_domains(self) -> List[str]: ...
    
    def set_logger(self, logger: Any) -> None: ...


def _reject_domain(domain: tuple) -> None:
    # Engines pass "" for "no domain".
    if any(domain):
        raise DomainNotSupportedError(domain)


class OktaRoleManager:
    """Read-only role manager backed by the Okta directory.
    
    Results are returned in directory order. That order is not part of
    the contract; sort the result when determinism matters.
    """
    
    def __init__(self, client: OktaClient):
        """Initialize the role manager.
        
        Args:
            client: Okta client, shared for the lifetime of the role manager
        """
        self._client = client
        self._users = UserService(client)
        self._groups = GroupService(client)
    
    @property
    def client(self) -> OktaClient:
        return self._client
    
    @classmethod
    def from_settings(cls, config: "AppConfig") -> "OktaRoleManager":
        """Build a role manager from loaded settings."""
        client = OktaClient(
            config.org_url,
            config.okta_api_token,
            timeout=config.request_timeout,
            page_limit=config.page_limit,
        )
        return cls(client)
    
    # ─────────────────────────────────────────────────────────────────────
    # Directory lookups
    # ─────────────────────────────────────────────────────────────────────
    def _get_user_by_login(self, login: str) -> DirectoryUser:
        matches = self._users.find_users_by_login(login)
        if not matches:
            logger.warning("Okta user '%s' not found", login)
            raise UserNotFoundError(login)
        if len(matches) > 1:
            logger.warning("Okta user '%s' is ambiguous (%d matches)", login, len(matches))
            raise AmbiguousResultError("user", login, len(matches))
        return DirectoryUser.from_payload(matches[0])
    
    def _get_group_by_name(self, name: str) -> DirectoryGroup:
        matches = self._groups.find_groups_by_name(name)
        if not matches:
            logger.warning("Okta group '%s' not found", name)
            raise GroupNotFoundError(name)
        if len(matches) > 1:
            logger.warning("Okta group '%s' is ambiguous (%d matches)", name, len(matches))
            raise AmbiguousResultError("group", name, len(matches))
        return DirectoryGroup.from_payload(matches[0])
    
    def _get_user_groups(self, user: DirectoryUser) -> List[str]:
        groups = self._users.list_user_groups(user.id)
        return [DirectoryGroup.from_payload(group).name for group in groups]
    
    def _get_group_users(self, group: DirectoryGroup) -> List[str]:
        members = [DirectoryUser.from_payload(user) for user in self._groups.list_group_users(group.id)]
        active = [member.login for member in members if member.is_active]
        if len(active) != len(members):
            logger.debug("Group '%s': skipped %d inactive member(s)", group.name, len(members) - len(active))
        return active
    
    # ─────────────────────────────────────────────────────────────────────
    # Role manager contract
    # ─────────────────────────────────────────────────────────────────────
    def clear(self) -> None:
        """Nothing is stored locally, so there is nothing to reset."""
        return None
    
    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        """Group membership is managed in Okta, not through the role manager."""
        raise OperationNotSupportedError("add_link")
    
    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        """Group membership is managed in Okta, not through the role manager."""
        raise OperationNotSupportedError("delete_link")
    
    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        """Determine whether user ``name1`` is a member of group ``name2``.
        
        Args:
            name1: User login
            name2: Group name
            
        Returns:
            True if name2 is one of the user's groups (exact match)
            
        Raises:
            DomainNotSupportedError: If a domain is passed
            UserNotFoundError: If the login matches no user
            AmbiguousResultError: If the login matches several users
        """
        _reject_domain(domain)
        return name2 in self.get_roles(name1)
    
    def get_roles(self, name: str, *domain: str) -> List[str]:
        """Return the names of every group the user belongs to.
        
        Args:
            name: User login
            
        Raises:
            DomainNotSupportedError: If a domain is passed
            UserNotFoundError: If the login matches no user
            AmbiguousResultError: If the login matches several users
            MalformedRecordError: If Okta returns a record without the expected fields
        """
        _reject_domain(domain)
        user = self._get_user_by_login(name)
        return self._get_user_groups(user)
    
    def get_users(self, name: str, *domain: str) -> List[str]:
        """Return the logins of the ACTIVE members of a group.
        
        Args:
            name: Group name
            
        Raises:
            DomainNotSupportedError: If a domain is passed
            GroupNotFoundError: If the name matches no group
            AmbiguousResultError: If the name matches several groups
            MalformedRecordError: If Okta returns a record without the expected fields
        """
        _reject_domain(domain)
        group = self._get_group_by_name(name)
        return self._get_group_users(group)
    
    def print_roles(self) -> None:
        raise OperationNotSupportedError("print_roles")
    
    def get_domains(self, name: str) -> List[str]:
        raise OperationNotSupportedError("get_domains")
    
    def get_all_domains(self) -> List[str]:
        raise OperationNotSupportedError("get_all_domains")
    
    def set_logger(self, logger: Any) -> None:
        # Module logging is used; an engine-supplied logger is ignored.
        return None


def new_role_manager(okta_domain: str, api_token: str, timeout: float = REQUEST_TIMEOUT) -> OktaRoleManager:
    """Create an Okta role manager.
    
    Args:
        okta_domain: Domain of your Okta org. If https://dev-123456.okta.com
            is your org URL, pass dev-123456.okta.com (a full URL also works).
        api_token: API token created in the Okta Admin console
        timeout: Per-request timeout in seconds
    """
    return OktaRoleManager(create_client(okta_domain, api_token, timeout=timeout))


def attach_to_enforcer(enforcer: Any, role_manager: RoleManager, ptype: str = "g") -> None:
    """Install a role manager on a pycasbin enforcer.
    
    ``enforce()`` builds the ``g()`` matcher function from the role
    definition's own ``rm`` attribute, which pycasbin only sets inside
    ``build_role_links``. That path calls ``print_roles()`` and ``add_link``
    for stored ``g`` rules, neither of which this role manager supports, so
    both places are assigned directly instead.
    
    Args:
        enforcer: pycasbin Enforcer
        role_manager: Role manager answering ``g()`` queries
        ptype: Role definition name in the model (default: g)
    """
    enforcer.rm_map[ptype] = role_manager
    enforcer.get_model()["g"][ptype].rm = role_manager
