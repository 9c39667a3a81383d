"""Okta directory role manager for Casbin-style authorization engines."""
from .core import (
    RoleManager,
    OktaRoleManager,
    new_role_manager,
    attach_to_enforcer,
    RoleManagerError,
    NotFoundError,
    UserNotFoundError,
    GroupNotFoundError,
    AmbiguousResultError,
    DomainNotSupportedError,
    OperationNotSupportedError,
    MalformedRecordError,
)
from .core.okta import OktaAPIError, OktaRateLimitError

__version__ = "0.1.0"

__all__ = [
    "RoleManager",
    "OktaRoleManager",
    "new_role_manager",
    "attach_to_enforcer",
    "RoleManagerError",
    "NotFoundError",
    "UserNotFoundError",
    "GroupNotFoundError",
    "AmbiguousResultError",
    "DomainNotSupportedError",
    "OperationNotSupportedError",
    "MalformedRecordError",
    "OktaAPIError",
    "OktaRateLimitError",
]
