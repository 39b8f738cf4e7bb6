"""
Shared pytest fixtures and configuration
"""
import json
import pytest
import httpx
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from fastapi.testclient import TestClient

from app.main import app
from app.apps.backend.services import BackendAPIService, get_backend_service


BACKEND_URL = "http://backend.test"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """
    In-memory stand-in for the upstream API, served through httpx.MockTransport.

    Routes are keyed by (method, path). A route is either a canned
    (status_code, json_body) pair or a handler taking the httpx.Request.
    Unknown routes answer 404 with the backend's error envelope.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[Tuple[int, Any], Handler]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status_code: int = 200):
        self.routes[(method.upper(), path)] = (status_code, body)

    def add_handler(self, method: str, path: str, handler: Handler):
        self.routes[(method.upper(), path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"success": False, "message": "Not found"})
        if callable(route):
            return route(request)
        status_code, body = route
        return httpx.Response(status_code, json=body)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method.upper() and request.url.path == path
        ]

    def json_body(self, request: httpx.Request) -> Any:
        return json.loads(request.content)


def envelope(data: Any = None, **extra) -> Dict[str, Any]:
    """Backend success envelope."""
    return {"success": True, "data": data, **extra}


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_service(backend: FakeBackend) -> BackendAPIService:
    """Backend client wired to the fake backend."""
    return BackendAPIService(
        base_url=BACKEND_URL,
        transport=httpx.MockTransport(backend.handle),
    )


@pytest.fixture(scope="function")
def client(backend_service: BackendAPIService) -> TestClient:
    """
    Create a test client with the backend dependency overridden.
    """
    app.dependency_overrides[get_backend_service] = lambda: backend_service

    test_client = TestClient(app)
    yield test_client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer admin-token"}


def make_post(
    slug: str,
    status: str = "published",
    featured: bool = False,
    publish_date: Optional[str] = None,
    created_at: Optional[str] = "2024-01-01T00:00:00Z",
    **extra,
) -> Dict[str, Any]:
    post = {
        "_id": f"id-{slug}",
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "excerpt": f"Excerpt for {slug}",
        "content": f"Body of {slug}",
        "status": status,
        "featured": featured,
        "tags": ["revops"],
        "createdAt": created_at,
    }
    if publish_date:
        post["publishDate"] = publish_date
    post.update(extra)
    return post
