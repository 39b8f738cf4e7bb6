"""
Unit tests for the backend API client and resource helpers
"""
import httpx
import pytest

from app.apps.backend.exceptions import (
    BackendAuthError,
    BackendDecodeError,
    BackendStatusError,
    BackendTransportError,
)
from app.apps.backend.services import blog_api, media_api, team_api
from app.apps.backend.services.api_service import error_message

from conftest import connection_refused, envelope


class TestFetch:
    @pytest.mark.asyncio
    async def test_returns_status_and_payload(self, backend, backend_service):
        backend.add("GET", "/api/blog", envelope([]))

        upstream = await backend_service.fetch("/api/blog")

        assert upstream.status_code == 200
        assert upstream.ok is True
        assert upstream.payload == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_non_success_status_is_returned_not_raised(self, backend, backend_service):
        backend.add("GET", "/api/blog/missing", {"success": False, "message": "Not found"}, 404)

        upstream = await backend_service.fetch("/api/blog/missing")

        assert upstream.status_code == 404
        assert upstream.ok is False

    @pytest.mark.asyncio
    async def test_sends_bearer_token(self, backend, backend_service):
        backend.add("GET", "/api/team", envelope([]))

        await backend_service.fetch("/api/team", token="secret")

        request = backend.calls("GET", "/api/team")[0]
        assert request.headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self, backend, backend_service):
        backend.add("GET", "/api/team", envelope([]))

        await backend_service.fetch("/api/team")

        assert "Authorization" not in backend.calls("GET", "/api/team")[0].headers

    @pytest.mark.asyncio
    async def test_transport_failure(self, backend, backend_service):
        backend.add_handler("GET", "/api/blog", connection_refused)

        with pytest.raises(BackendTransportError):
            await backend_service.fetch("/api/blog")

    @pytest.mark.asyncio
    async def test_non_json_body(self, backend, backend_service):
        backend.add_handler(
            "GET", "/api/blog", lambda request: httpx.Response(502, text="<html>Bad gateway</html>")
        )

        with pytest.raises(BackendDecodeError) as exc_info:
            await backend_service.fetch("/api/blog")

        assert exc_info.value.status_code == 502


class TestRequest:
    @pytest.mark.asyncio
    async def test_error_message_from_payload(self, backend, backend_service):
        backend.add("POST", "/api/blog", {"success": False, "message": "Slug already exists"}, 400)

        with pytest.raises(BackendStatusError) as exc_info:
            await backend_service.request("/api/blog", "POST", json={"title": "x"})

        assert exc_info.value.message == "Slug already exists"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_auth_failures(self, backend, backend_service, status_code):
        backend.add("GET", "/api/content", {"success": False, "message": "Not authorized"}, status_code)

        with pytest.raises(BackendAuthError):
            await backend_service.request("/api/content", token="expired")

    def test_error_message_fallbacks(self):
        assert error_message({"error": "Boom"}) == "Boom"
        assert error_message({}) == "API request failed"
        assert error_message(["not", "a", "dict"]) == "API request failed"


class TestCollections:
    @pytest.mark.asyncio
    async def test_collection_data(self, backend, backend_service):
        backend.add("GET", "/api/team", envelope([{"name": "Ada"}]))

        assert await backend_service.get_collection("/api/team") == [{"name": "Ada"}]

    @pytest.mark.asyncio
    async def test_collection_failure_is_empty(self, backend, backend_service):
        backend.add("GET", "/api/team", {"success": False}, 500)
        backend.add_handler("GET", "/api/blog", connection_refused)

        assert await backend_service.get_collection("/api/team") == []
        assert await backend_service.get_collection("/api/blog") == []

    @pytest.mark.asyncio
    async def test_record_missing_is_none(self, backend, backend_service):
        assert await backend_service.get_record("/api/blog/nope") is None


class TestResources:
    @pytest.mark.asyncio
    async def test_admin_listing_path_and_params(self, backend, backend_service):
        backend.add("GET", "/api/blog/admin/all", envelope([]))

        await blog_api.list(backend_service, "tok", page=2, limit=10, status="draft")

        request = backend.calls("GET", "/api/blog/admin/all")[0]
        assert request.url.params["page"] == "2"
        assert request.url.params["limit"] == "10"
        assert request.url.params["status"] == "draft"

    @pytest.mark.asyncio
    async def test_team_listing_includes_inactive(self, backend, backend_service):
        backend.add("GET", "/api/team", envelope([]))

        await team_api.list(backend_service, "tok")

        assert backend.calls("GET", "/api/team")[0].url.params["status"] == "all"

    @pytest.mark.asyncio
    async def test_upload_returns_url(self, backend, backend_service):
        backend.add("POST", "/api/media", envelope({"url": "https://cdn.test/blog/cover.png"}))

        url = await media_api.upload(
            backend_service, "tok", "cover.png", b"\x89PNG", "image/png", folder="blog"
        )

        assert url == "https://cdn.test/blog/cover.png"
        request = backend.calls("POST", "/api/media")[0]
        assert b'name="folder"' in request.content
        assert b"cover.png" in request.content

    @pytest.mark.asyncio
    async def test_upload_without_url_fails(self, backend, backend_service):
        backend.add("POST", "/api/media", envelope({}))

        with pytest.raises(BackendStatusError):
            await media_api.upload(backend_service, "tok", "cover.png", b"data")

    @pytest.mark.asyncio
    async def test_upload_with_non_object_data_fails(self, backend, backend_service):
        backend.add("POST", "/api/media", envelope("https://cdn.test/blog/cover.png"))

        with pytest.raises(BackendStatusError):
            await media_api.upload(backend_service, "tok", "cover.png", b"data")

    @pytest.mark.asyncio
    async def test_upload_with_list_body_fails(self, backend, backend_service):
        backend.add("POST", "/api/media", [{"url": "https://cdn.test/blog/cover.png"}])

        with pytest.raises(BackendStatusError):
            await media_api.upload(backend_service, "tok", "cover.png", b"data")
