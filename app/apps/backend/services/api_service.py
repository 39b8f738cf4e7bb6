"""
Backend API Service
HTTP client for the upstream JSON API shared by public pages, proxy routes
and the admin dashboard.
"""
import httpx
from typing import Any, Dict, List, NamedTuple, Optional
import logging

from app.config import API_URL, API_TIMEOUT
from app.apps.backend.exceptions import (
    BackendAuthError,
    BackendDecodeError,
    BackendStatusError,
    BackendTransportError,
)

logger = logging.getLogger(__name__)


class UpstreamResponse(NamedTuple):
    status_code: int
    payload: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def error_message(payload: Any, default: str = "API request failed") -> str:
    """Pick the human readable message out of an error envelope."""
    if isinstance(payload, dict):
        return payload.get("message") or payload.get("error") or default
    return default


class BackendAPIService:
    def __init__(
        self,
        base_url: str = API_URL,
        timeout: Optional[float] = API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Tests inject httpx.MockTransport here
        self.transport = transport
        self.headers = {
            "Accept": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def fetch(
        self,
        path: str,
        method: str = "GET",
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        token: Optional[str] = None,
        files: Any = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> UpstreamResponse:
        """
        Issue a request to base_url + path and decode the JSON body.

        Raises:
            BackendTransportError: the request did not complete.
            BackendDecodeError: the body could not be parsed as JSON.
        """
        headers = dict(self.headers)
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    files=files,
                    data=data,
                    headers=headers,
                )
        except httpx.RequestError as req_err:
            logger.error(f"Backend request error on {method} {path}: {req_err}")
            raise BackendTransportError(str(req_err)) from req_err

        try:
            payload = response.json()
        except ValueError as decode_err:
            logger.error(
                f"Backend returned non-JSON body for {method} {path} "
                f"(status {response.status_code})"
            )
            raise BackendDecodeError(
                "Malformed response from backend", status_code=response.status_code
            ) from decode_err

        return UpstreamResponse(response.status_code, payload)

    async def request(self, path: str, method: str = "GET", **kwargs) -> Any:
        """
        Same as fetch() but non-success statuses raise.

        Returns the parsed JSON envelope verbatim ({success, data, pagination?}).
        """
        upstream = await self.fetch(path, method, **kwargs)
        if upstream.ok:
            return upstream.payload

        message = error_message(upstream.payload)
        if upstream.status_code in (401, 403):
            raise BackendAuthError(message, upstream.status_code, upstream.payload)
        raise BackendStatusError(message, upstream.status_code, upstream.payload)

    async def get_collection(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Fetch a list envelope; any failure yields an empty list."""
        try:
            upstream = await self.fetch(path, params=params)
        except (BackendTransportError, BackendDecodeError) as e:
            logger.error(f"Failed to fetch collection {path}: {e}")
            return []

        if not upstream.ok:
            logger.warning(f"Collection {path} returned status {upstream.status_code}")
            return []

        payload = upstream.payload
        data = payload.get("data") if isinstance(payload, dict) else None
        return data if isinstance(data, list) else []

    async def get_record(self, path: str) -> Optional[Dict[str, Any]]:
        """Fetch a single-record envelope; any failure yields None."""
        try:
            upstream = await self.fetch(path)
        except (BackendTransportError, BackendDecodeError) as e:
            logger.error(f"Failed to fetch record {path}: {e}")
            return None

        if not upstream.ok:
            return None

        payload = upstream.payload
        data = payload.get("data") if isinstance(payload, dict) else None
        return data if isinstance(data, dict) else None


# Initialize the backend API service
backend_service = BackendAPIService()


def get_backend_service() -> BackendAPIService:
    """FastAPI dependency returning the shared (stateless) backend client."""
    return backend_service
