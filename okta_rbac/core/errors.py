"""Role manager exceptions.

Transport and HTTP failures are not wrapped: they surface as
``okta_rbac.core.okta.OktaAPIError`` or ``requests.RequestException``.
"""


class RoleManagerError(Exception):
    """Base exception for role resolution failures."""
    pass


class NotFoundError(RoleManagerError, LookupError):
    """No directory entry matches the requested name."""
    
    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Okta {kind} '{name}' not found")


class UserNotFoundError(NotFoundError):
    """User lookup failed - no user with this login."""
    
    def __init__(self, login: str):
        super().__init__("user", login)


class GroupNotFoundError(NotFoundError):
    """Group lookup failed - no group with this name."""
    
    def __init__(self, name: str):
        super().__init__("group", name)


class AmbiguousResultError(RoleManagerError, LookupError):
    """More than one directory entry matches a name that must be unique.
    
    Attributes:
        kind: "user" or "group"
        name: Name that was looked up
        count: Number of matches returned
    """
    
    def __init__(self, kind: str, name: str, count: int):
        self.kind = kind
        self.name = name
        self.count = count
        super().__init__(f"{count} Okta {kind}s match '{name}'; expected exactly one")


class DomainNotSupportedError(RoleManagerError, ValueError):
    """A domain qualifier was passed; this role manager has no domains."""
    
    def __init__(self, domain):
        self.domain = tuple(domain)
        super().__init__(f"Domains are not supported (got {list(self.domain)!r})")


class OperationNotSupportedError(RoleManagerError, NotImplementedError):
    """Operation is not available on a read-only directory role manager."""
    
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not implemented: the Okta directory is read-only here")


class MalformedRecordError(RoleManagerError):
    """A directory record lacks a required field or has the wrong shape."""
    
    def __init__(self, kind: str, field: str, record_id: str = ""):
        self.kind = kind
        self.field = field
        self.record_id = record_id
        where = f" (id={record_id})" if record_id else ""
        super().__init__(f"Malformed Okta {kind} record{where}: missing or invalid '{field}'")
