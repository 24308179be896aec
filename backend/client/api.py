"""
HTTP client for the AccountKit API.

Wraps httpx and turns every failure into a ClientError subclass:

- no response at all -> NetworkError
- 401 to a request carrying a token -> SessionExpiredError (unless the
  server says "forbidden")
- any other error status -> ApiError with the server's ``error`` message
- a success body that is not JSON -> ApiError("Invalid response format")
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import get_settings

from .exceptions import ApiError, NetworkError, SessionExpiredError

logger = logging.getLogger(__name__)

REQUEST_FAILED = "Request failed"
INVALID_RESPONSE = "Invalid response format"

_NO_BODY = object()


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return _NO_BODY


def error_from_response(response: httpx.Response, authenticated: bool = True) -> ApiError:
    """
    Build the exception for an error response.

    Args:
        response: A response with a 4xx/5xx status
        authenticated: Whether the request carried a bearer token. A 401 to
            an anonymous request (bad login) is not an expired session.

    Returns:
        The ApiError (or subclass) describing it
    """
    body = _parse_json(response)
    message = body.get("error") if isinstance(body, dict) else None
    if not isinstance(message, str) or not message:
        message = REQUEST_FAILED

    status_code = response.status_code
    if status_code == 401 and authenticated and "forbidden" not in message.lower():
        return SessionExpiredError(message, status_code)
    return ApiError(message, status_code)


class ApiClient:
    """
    JSON-over-HTTP client for the API.

    The underlying httpx.Client can be injected, which is how tests point
    the client at an in-process app (a FastAPI TestClient is an
    httpx.Client).

    Usage:
        api = ApiClient("http://localhost:3000/api")
        api.post("/auth/login", {"email": ..., "password": ...})
        api.get("/profile", token=token)
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying connection pool if this client created it."""
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _headers(token: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        token: Optional[str] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            endpoint: Path below the base URL, e.g. "/auth/login"
            data: JSON body, or None to send none
            token: Bearer token to authenticate with

        Returns:
            The decoded JSON body

        Raises:
            NetworkError: No response was received
            SessionExpiredError: The server answered 401 to a token
            ApiError: Any other error status, or an undecodable success body
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._http.request(
                method,
                url,
                json=data,
                headers=self._headers(token),
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise NetworkError() from e

        if response.is_error:
            raise error_from_response(response, authenticated=bool(token))

        body = _parse_json(response)
        if body is _NO_BODY:
            raise ApiError(INVALID_RESPONSE, response.status_code)
        return body

    def get(self, endpoint: str, token: Optional[str] = None) -> Any:
        return self.request("GET", endpoint, token=token)

    def post(self, endpoint: str, data: Any, token: Optional[str] = None) -> Any:
        return self.request("POST", endpoint, data=data, token=token)

    def put(self, endpoint: str, data: Any, token: Optional[str] = None) -> Any:
        return self.request("PUT", endpoint, data=data, token=token)
