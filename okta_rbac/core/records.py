"""Typed projections of Okta user and group representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .errors import MalformedRecordError

ACTIVE = "ACTIVE"


def _require_str(source: Any, key: str, kind: str, record_id: str = "") -> str:
    value = source.get(key) if isinstance(source, dict) else None
    if not isinstance(value, str) or not value:
        raise MalformedRecordError(kind, key, record_id)
    return value


def _profile(payload: dict, kind: str, record_id: str) -> dict:
    profile = payload.get("profile")
    if not isinstance(profile, dict):
        raise MalformedRecordError(kind, "profile", record_id)
    return profile


@dataclass(frozen=True)
class DirectoryUser:
    """An Okta user reduced to the fields the role manager reads."""
    id: str
    login: str
    status: str
    
    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE
    
    @classmethod
    def from_payload(cls, payload: Any) -> "DirectoryUser":
        """Validate and project a raw user representation.
        
        Raises:
            MalformedRecordError: If id, status or profile.login is absent or not a string
        """
        if not isinstance(payload, dict):
            raise MalformedRecordError("user", "id")
        user_id = _require_str(payload, "id", "user")
        status = _require_str(payload, "status", "user", user_id)
        login = _require_str(_profile(payload, "user", user_id), "login", "user", user_id)
        return cls(id=user_id, login=login, status=status)


@dataclass(frozen=True)
class DirectoryGroup:
    """An Okta group reduced to its ID and display name."""
    id: str
    name: str
    
    @classmethod
    def from_payload(cls, payload: Any) -> "DirectoryGroup":
        """Validate and project a raw group representation.
        
        Raises:
            MalformedRecordError: If id or profile.name is absent or not a string
        """
        if not isinstance(payload, dict):
            raise MalformedRecordError("group", "id")
        group_id = _require_str(payload, "id", "group")
        name = _require_str(_profile(payload, "group", group_id), "name", "group", group_id)
        return cls(id=group_id, name=name)
