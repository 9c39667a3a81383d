"""Low-level HTTP client for the Okta Management API.

Handles API token authentication, pagination and HTTP error mapping.
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from urllib.parse import urlsplit

import requests

from .exceptions import OktaAPIError, OktaError, OktaRateLimitError

REQUEST_TIMEOUT = 5
DEFAULT_PAGE_LIMIT = 200


def org_url_from_domain(okta_domain: str) -> str:
    """Build the org URL from an Okta domain (dev-123456.okta.com -> https://dev-123456.okta.com)."""
    domain = (okta_domain or "").strip().rstrip("/")
    if not domain:
        raise ValueError("Okta domain must not be empty")
    if domain.startswith("https://") or domain.startswith("http://"):
        return domain
    return f"https://{domain}"


class OktaClient:
    """HTTP client for the Okta Management API.
    
    The client holds no mutable state after construction and can be shared
    between threads for read operations.
    
    Usage:
        client = OktaClient("https://dev-123456.okta.com", "00abc...")
        users = client.get_all("/api/v1/users", params={"search": 'profile.login eq "alice@test.com"'})
    """
    
    def __init__(
        self,
        org_url: str,
        api_token: str,
        timeout: float = REQUEST_TIMEOUT,
        page_limit: int = DEFAULT_PAGE_LIMIT,
    ):
        """Initialize Okta client.
        
        Args:
            org_url: Okta org URL (e.g. https://dev-123456.okta.com)
            api_token: API token created in the Okta Admin console
            timeout: Per-request timeout in seconds
            page_limit: Page size requested from list endpoints
        """
        if not api_token:
            raise ValueError("Okta API token must not be empty")
        self.base_url = org_url.rstrip("/")
        self.timeout = timeout
        self.page_limit = page_limit
        self._token = api_token
    
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"SSWS {self._token}",
            "Accept": "application/json",
        }
    
    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute GET request against the org.
        
        Args:
            path: API endpoint path (e.g., "/api/v1/users") or absolute URL on the org
            params: Query parameters
            **kwargs: Additional arguments for requests.get
            
        Returns:
            Response object
            
        Raises:
            OktaError: If an absolute URL points outside the org
            OktaAPIError: On HTTP error
        """
        if path.startswith("http"):
            if _origin(path) != _origin(self.base_url):
                raise OktaError(f"Refusing to send the API token outside {self.base_url}: {path}")
            url = path
        else:
            url = f"{self.base_url}{path}"
        headers = kwargs.pop("headers", {})
        headers.update(self._headers())
        
        resp = requests.get(url, params=params, headers=headers, timeout=self.timeout, **kwargs)
        self._handle_error(resp)
        return resp
    
    def get_all(self, path: str, params: Optional[Dict] = None) -> List[Dict[str, Any]]:
        """Fetch every page of a list endpoint and return the concatenated items.
        
        Okta paginates with a ``Link: <...>; rel="next"`` header whose URL
        already carries the cursor and the original query, so follow-up
        requests are sent without params.
        
        Args:
            path: List endpoint path
            params: Query parameters for the first page
            
        Returns:
            All items across all pages, in server order
            
        Raises:
            OktaError: If a next link points outside the org
            OktaAPIError: On HTTP error for any page
        """
        query = dict(params or {})
        query.setdefault("limit", self.page_limit)
        
        items: List[Dict[str, Any]] = []
        resp = self.get(path, params=query)
        while True:
            page = resp.json() or []
            if not isinstance(page, list):
                raise OktaAPIError(resp.status_code, "Expected a JSON array from list endpoint", resp.url)
            items.extend(page)
            
            next_url = _next_link(resp)
            if not next_url:
                return items
            resp = self.get(next_url)
    
    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.
        
        Args:
            resp: Response object to check
            
        Raises:
            OktaRateLimitError: If the org rate limit was hit
            OktaAPIError: If response status indicates error
        """
        if resp.status_code < 400:
            return
        
        message = resp.text
        error_code = ""
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("errorSummary") or message
            error_code = body.get("errorCode") or ""
        
        if resp.status_code == 429:
            reset = resp.headers.get("X-Rate-Limit-Reset")
            raise OktaRateLimitError(
                message,
                resp.url,
                error_code,
                reset_at=int(reset) if reset and reset.isdigit() else None,
            )
        raise OktaAPIError(resp.status_code, message, resp.url, error_code)


def _origin(url: str) -> tuple:
    parts = urlsplit(url)
    return parts.scheme.lower(), parts.netloc.lower()


def _next_link(resp: requests.Response) -> Optional[str]:
    links = getattr(resp, "links", None) or {}
    nxt = links.get("next") or {}
    return nxt.get("url")


def escape_search_value(value: str) -> str:
    """Escape a value for use inside a double-quoted Okta search expression."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def create_client(okta_domain: str, api_token: str, timeout: float = REQUEST_TIMEOUT) -> OktaClient:
    """Create an OktaClient from an org domain such as dev-123456.okta.com."""
    return OktaClient(org_url_from_domain(okta_domain), api_token, timeout=timeout)
