"""Core role resolution: Okta client, record projection and role manager."""
from .errors import (
    RoleManagerError,
    NotFoundError,
    UserNotFoundError,
    GroupNotFoundError,
    AmbiguousResultError,
    DomainNotSupportedError,
    OperationNotSupportedError,
    MalformedRecordError,
)
from .records import DirectoryUser, DirectoryGroup
from .role_manager import RoleManager, OktaRoleManager, new_role_manager, attach_to_enforcer

__all__ = [
    "RoleManagerError",
    "NotFoundError",
    "UserNotFoundError",
    "GroupNotFoundError",
    "AmbiguousResultError",
    "DomainNotSupportedError",
    "OperationNotSupportedError",
    "MalformedRecordError",
    "DirectoryUser",
    "DirectoryGroup",
    "RoleManager",
    "OktaRoleManager",
    "new_role_manager",
    "attach_to_enforcer",
]
