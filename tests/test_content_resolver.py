"""
Tests for CMS content resolution and SEO fallbacks
"""
import pytest
from fastapi import status

from app.apps.content.defaults import get_default_content
from app.apps.content.resolver import (
    get_page_content,
    get_page_seo,
    get_section,
    resolve_sections,
)
from app.apps.content.schemas import PageContent

from conftest import connection_refused, envelope


STORED_HOME = {
    "page": "home",
    "sections": {"hero": {"title": "Stored hero"}},
    "seo": {"metaTitle": "Stored title", "metaDescription": "", "keywords": ["revops"]},
    "updatedAt": "2024-05-01T10:00:00Z",
}


class TestGetPageContent:
    @pytest.mark.asyncio
    async def test_stored_record(self, backend, backend_service):
        backend.add("GET", "/api/content/home", envelope(STORED_HOME))

        content = await get_page_content("home", backend_service)

        assert content.is_default is False
        assert get_section(content, "hero") == {"title": "Stored hero"}
        assert get_section(content, "missing") is None
        assert content.updated_at is not None

    @pytest.mark.asyncio
    async def test_page_key_is_lowercased(self, backend, backend_service):
        backend.add("GET", "/api/content/home", envelope(STORED_HOME))

        content = await get_page_content("HOME", backend_service)

        assert content.page == "home"
        assert content.is_default is False

    @pytest.mark.asyncio
    async def test_transport_failure_gives_skeleton(self, backend, backend_service):
        backend.add_handler("GET", "/api/content/home", connection_refused)

        content = await get_page_content("home", backend_service)

        assert content.is_default is True
        assert content.sections == {}

    @pytest.mark.asyncio
    async def test_missing_page_gives_skeleton(self, backend_service):
        content = await get_page_content("nope", backend_service)

        assert content.page == "nope"
        assert content.is_default is True

    @pytest.mark.asyncio
    async def test_backend_defaults_are_not_stored_content(self, backend, backend_service):
        backend.add("GET", "/api/content/home", envelope({**STORED_HOME, "isDefault": True}))

        content = await get_page_content("home", backend_service)

        assert content.is_default is True
        assert content.sections == {}

    @pytest.mark.asyncio
    async def test_unsuccessful_envelope(self, backend, backend_service):
        backend.add("GET", "/api/content/home", {"success": False, "data": STORED_HOME})

        content = await get_page_content("home", backend_service)

        assert content.is_default is True


class TestSections:
    def test_stored_sections_win_over_defaults(self):
        content = PageContent(page="home", sections={"hero": {"title": "Stored hero"}})

        sections = resolve_sections(content)

        assert sections["hero"] == {"title": "Stored hero"}
        assert sections["cta"] == get_default_content("home")["cta"]

    def test_defaults_are_copied(self):
        sections = resolve_sections(PageContent(page="home"))
        sections["hero"]["title"] = "changed"

        assert get_default_content("home")["hero"]["title"] != "changed"

    def test_unknown_page_has_no_defaults(self):
        assert resolve_sections(PageContent(page="unknown")) == {}


class TestPageSEO:
    def test_stored_values_with_field_fallback(self):
        content = PageContent.model_validate(
            {"page": "home", "seo": STORED_HOME["seo"]}
        )

        seo = get_page_seo(content, "home")

        assert seo.title == "Stored title"
        assert seo.description.startswith("Transform your revenue operations")
        assert seo.keywords == ["revops"]

    def test_known_page_defaults(self):
        seo = get_page_seo(PageContent(page="contact"), "contact")

        assert seo.title == "Contact - Growth Valley"
        assert seo.keywords == []

    def test_unknown_page_defaults(self):
        seo = get_page_seo(PageContent(page="unknown"), "unknown")

        assert seo.title == "Growth Valley"
        assert seo.description == ""


class TestContentRoute:
    @pytest.mark.asyncio
    async def test_resolved_content(self, client, backend):
        backend.add("GET", "/api/content/home", envelope(STORED_HOME))

        response = client.get("/pages/content/home")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["page"] == "home"
        assert data["sections"]["hero"] == {"title": "Stored hero"}
        assert "stats" in data["sections"]
        assert data["seo"]["title"] == "Stored title"
        assert data["is_default"] is False

    @pytest.mark.asyncio
    async def test_backend_down_still_renders(self, client, backend):
        backend.add_handler("GET", "/api/content/contact", connection_refused)

        response = client.get("/pages/content/contact")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["is_default"] is True
        assert "form" in response.json()["sections"]
