"""
Content resolver
Fetches CMS page content from the backend and merges it with page-level
defaults. Nothing here mutates shared state, so calls for the same page key
may run concurrently.
"""
from typing import Any, Dict, Optional
import logging

from pydantic import ValidationError

from app.apps.backend.exceptions import BackendAPIError
from app.apps.backend.schemas import SEOFields, StoredPageContent
from app.apps.backend.services import BackendAPIService, backend_service
from app.apps.content.defaults import get_default_content, get_default_seo
from app.apps.content.schemas import PageContent, PageSEO

logger = logging.getLogger(__name__)


def default_page_content(page: str) -> PageContent:
    """Skeleton returned whenever a page has no usable stored record."""
    return PageContent(
        page=page.lower(),
        sections={},
        seo=SEOFields(),
        is_default=True,
    )


async def get_page_content(
    page: str, service: Optional[BackendAPIService] = None
) -> PageContent:
    """
    Fetch the content record for a page.

    Never raises: network errors, non-success statuses and malformed bodies
    all resolve to the default skeleton so the page can still render.
    """
    service = service or backend_service
    page_key = page.lower()

    try:
        upstream = await service.fetch(f"/api/content/{page_key}")
    except BackendAPIError as e:
        logger.error(f"Failed to fetch content for {page_key}: {e}")
        return default_page_content(page_key)

    if not upstream.ok:
        logger.warning(f"Content for {page_key} returned status {upstream.status_code}")
        return default_page_content(page_key)

    payload = upstream.payload
    if not isinstance(payload, dict) or not payload.get("success"):
        return default_page_content(page_key)

    data = payload.get("data")
    # The backend answers with its own defaults (isDefault) when nothing is stored
    if not isinstance(data, dict) or data.get("isDefault"):
        return default_page_content(page_key)

    try:
        stored = StoredPageContent.model_validate({"page": page_key, **data})
    except ValidationError as e:
        logger.error(f"Malformed content record for {page_key}: {e}")
        return default_page_content(page_key)

    return PageContent(
        page=page_key,
        sections=stored.sections,
        seo=stored.seo or SEOFields(),
        updated_at=stored.updated_at,
        is_default=False,
    )


def get_section(content: PageContent, section: str) -> Optional[Any]:
    """Stored payload for a section, or None. The payload shape is not checked."""
    return content.sections.get(section)


def resolve_sections(content: PageContent) -> Dict[str, Any]:
    """Default sections for the page overlaid with whatever is stored."""
    sections = get_default_content(content.page)
    sections.update(content.sections)
    return sections


def get_page_seo(content: PageContent, page: str) -> PageSEO:
    """
    SEO metadata for a page, falling back field by field to the static
    per-page defaults when the stored value is missing or empty.
    """
    defaults = get_default_seo(page)
    seo = content.seo or SEOFields()

    return PageSEO(
        title=seo.meta_title or defaults["title"],
        description=seo.meta_description or defaults["description"],
        keywords=seo.keywords or [],
        og_image=seo.og_image or None,
        canonical_url=seo.canonical_url or None,
    )
