"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from okta_rbac.core.okta.client import DEFAULT_PAGE_LIMIT, REQUEST_TIMEOUT, org_url_from_domain

logger = logging.getLogger(__name__)


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).
    
    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)
    
    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback
    
    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name
    
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
    
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("Loaded %s from environment (fallback)", env_var)
            return secret_value
    
    return None


def _get_required(var_name: str) -> str:
    value = os.environ.get(var_name, "").strip()
    if not value:
        raise RuntimeError(f"Environment variable {var_name} is required.")
    return value


def _get_number(var_name: str, default, cast):
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{var_name} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{var_name} must be positive and finite, got {raw!r}")
    return value


@dataclass
class AppConfig:
    """Okta connection settings."""
    okta_domain: str
    okta_api_token: str
    request_timeout: float = REQUEST_TIMEOUT
    page_limit: int = DEFAULT_PAGE_LIMIT
    
    @property
    def org_url(self) -> str:
        """Org URL derived from the domain (https:// added when missing)."""
        return org_url_from_domain(self.okta_domain)
    
    def __repr__(self) -> str:
        return (
            f"AppConfig(okta_domain={self.okta_domain!r}, okta_api_token='***', "
            f"request_timeout={self.request_timeout!r}, page_limit={self.page_limit!r})"
        )


def load_settings(okta_domain: str | None = None, okta_api_token: str | None = None) -> AppConfig:
    """Load Okta settings from environment and /run/secrets.
    
    Args:
        okta_domain: Explicit domain, takes priority over OKTA_DOMAIN
        okta_api_token: Explicit API token, takes priority over secrets and OKTA_API_TOKEN
    
    Raises:
        RuntimeError: If OKTA_DOMAIN or the API token is missing
        ValueError: If a numeric setting is malformed
    """
    okta_domain = okta_domain or _get_required("OKTA_DOMAIN")
    
    api_token = okta_api_token or _load_secret_from_file("okta_api_token", "OKTA_API_TOKEN")
    if not api_token:
        raise RuntimeError("OKTA_API_TOKEN not found in /run/secrets or environment")
    
    request_timeout = _get_number("OKTA_REQUEST_TIMEOUT", float(REQUEST_TIMEOUT), float)
    page_limit = _get_number("OKTA_PAGE_LIMIT", DEFAULT_PAGE_LIMIT, int)
    
    logger.info("Okta settings loaded; domain=%s timeout=%ss page_limit=%d", okta_domain, request_timeout, page_limit)
    
    return AppConfig(
        okta_domain=okta_domain,
        okta_api_token=api_token,
        request_timeout=request_timeout,
        page_limit=page_limit,
    )
