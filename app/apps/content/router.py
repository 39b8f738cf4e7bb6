"""
Content router
Public read access to resolved CMS page content
"""
from fastapi import APIRouter, Depends, status
import logging

from app.apps.backend.services import BackendAPIService, get_backend_service
from app.apps.content.resolver import get_page_content, get_page_seo, resolve_sections
from app.apps.content.schemas import ResolvedPageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{page_key}", response_model=ResolvedPageResponse, status_code=status.HTTP_200_OK)
async def get_content(
    page_key: str,
    service: BackendAPIService = Depends(get_backend_service),
):
    """
    Get content and SEO for a page (public endpoint, no auth required).
    Stored sections are laid over the bundled defaults; a missing page
    yields the defaults, never an error.
    """
    content = await get_page_content(page_key, service)
    return ResolvedPageResponse(
        page=content.page,
        sections=resolve_sections(content),
        seo=get_page_seo(content, page_key),
        is_default=content.is_default,
        updated_at=content.updated_at,
    )
