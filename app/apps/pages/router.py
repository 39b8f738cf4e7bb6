"""
Public page router
Server-side view models for the marketing site. Every upstream failure on a
listing degrades to an empty page; detail pages answer 404 when the record is
missing or not published.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, Optional
import asyncio
import logging

from app.config import SITE_NAME
from app.apps.backend.services import BackendAPIService, get_backend_service
from app.apps.content.resolver import get_page_content, get_page_seo, resolve_sections
from app.apps.content.schemas import PageSEO
from app.apps.pages.listing import (
    display_date,
    is_published,
    partition_featured,
    published_only,
    sort_recent,
)
from app.apps.pages.rich_text import render_blocks
from app.apps.pages.schemas import (
    ArticleListingPage,
    ArticlePage,
    CaseStudyListingPage,
    CaseStudyPage,
    CompanyPage,
    ContentPage,
)

logger = logging.getLogger(__name__)

router = APIRouter()

BLOG_FEATURED_LIMIT = 2
RELATED_POSTS_LIMIT = 3
DESCRIPTION_LENGTH = 160

BLOG_SEO = PageSEO(
    title=f"Blog | {SITE_NAME}",
    description=(
        f"Insights, strategies, and best practices for B2B revenue growth "
        f"from the {SITE_NAME} team."
    ),
)

INSIGHTS_SEO = PageSEO(
    title="Insights",
    description=(
        "Expert perspectives on revenue operations, sales process design, "
        "and B2B growth strategies."
    ),
)


def _article_seo(post: Dict[str, Any], title_suffix: str = "") -> PageSEO:
    seo = post.get("seo") or {}
    title = seo.get("metaTitle") or f"{post.get('title', '')}{title_suffix}"
    return PageSEO(
        title=title,
        description=seo.get("metaDescription") or post.get("excerpt") or "",
        keywords=seo.get("keywords") or post.get("tags") or [],
        og_image=seo.get("ogImage") or post.get("featuredImage"),
        canonical_url=seo.get("canonicalUrl"),
    )


async def _published_or_404(service: BackendAPIService, path: str, label: str) -> Dict[str, Any]:
    record = await service.get_record(path)
    if not record or not is_published(record):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found",
        )
    return record


async def _article_listing(
    service: BackendAPIService, seo: PageSEO, featured_limit: Optional[int] = None
) -> ArticleListingPage:
    posts = published_only(await service.get_collection("/api/blog"))
    featured, others = partition_featured(posts)
    if featured_limit is not None:
        featured = featured[:featured_limit]

    return ArticleListingPage(
        seo=seo,
        featured=featured,
        posts=sort_recent(others),
        total=len(posts),
    )


@router.get("/blog", response_model=ArticleListingPage, status_code=status.HTTP_200_OK)
async def blog_index(service: BackendAPIService = Depends(get_backend_service)):
    """Blog index: up to two featured posts plus every other published post, newest first."""
    return await _article_listing(service, BLOG_SEO, featured_limit=BLOG_FEATURED_LIMIT)


@router.get("/blog/{slug}", response_model=ArticlePage, status_code=status.HTTP_200_OK)
async def blog_post(slug: str, service: BackendAPIService = Depends(get_backend_service)):
    post = await _published_or_404(service, f"/api/blog/{slug}", "Blog post")

    related = [
        other
        for other in published_only(await service.get_collection("/api/blog"))
        if other.get("slug") != slug
    ][:RELATED_POSTS_LIMIT]

    return ArticlePage(
        seo=_article_seo(post, f" | {SITE_NAME} Blog"),
        post=post,
        blocks=render_blocks(post.get("content")),
        display_date=display_date(post),
        related=related,
    )


@router.get("/insights", response_model=ArticleListingPage, status_code=status.HTTP_200_OK)
async def insights_index(service: BackendAPIService = Depends(get_backend_service)):
    return await _article_listing(service, INSIGHTS_SEO)


@router.get("/insights/{slug}", response_model=ArticlePage, status_code=status.HTTP_200_OK)
async def insight_post(slug: str, service: BackendAPIService = Depends(get_backend_service)):
    post = await _published_or_404(service, f"/api/blog/{slug}", "Article")
    return ArticlePage(
        seo=_article_seo(post),
        post=post,
        blocks=render_blocks(post.get("content")),
        display_date=display_date(post),
    )


@router.get("/case-studies", response_model=CaseStudyListingPage, status_code=status.HTTP_200_OK)
async def case_studies_index(service: BackendAPIService = Depends(get_backend_service)):
    content, case_studies = await asyncio.gather(
        get_page_content("case-studies", service),
        service.get_collection("/api/case-studies"),
    )
    featured, others = partition_featured(published_only(case_studies))

    return CaseStudyListingPage(
        seo=get_page_seo(content, "case-studies"),
        featured=featured,
        others=sort_recent(others),
    )


@router.get("/case-studies/{slug}", response_model=CaseStudyPage, status_code=status.HTTP_200_OK)
async def case_study_detail(slug: str, service: BackendAPIService = Depends(get_backend_service)):
    case_study = await _published_or_404(service, f"/api/case-studies/{slug}", "Case study")

    seo = case_study.get("seo") or {}
    challenge = case_study.get("challenge") or ""

    return CaseStudyPage(
        seo=PageSEO(
            title=seo.get("metaTitle") or case_study.get("title") or "Case Study",
            description=seo.get("metaDescription") or challenge[:DESCRIPTION_LENGTH],
            keywords=seo.get("keywords") or case_study.get("technologies") or [],
            og_image=seo.get("ogImage") or case_study.get("featuredImage"),
            canonical_url=seo.get("canonicalUrl"),
        ),
        case_study=case_study,
        challenge=render_blocks(challenge),
        solution=render_blocks(case_study.get("solution")),
    )


@router.get("/company", response_model=CompanyPage, status_code=status.HTTP_200_OK)
async def company_page(service: BackendAPIService = Depends(get_backend_service)):
    """Company page: CMS content and the active team, fetched concurrently."""
    content, team = await asyncio.gather(
        get_page_content("company", service),
        service.get_collection("/api/team"),
    )

    return CompanyPage(
        page=content.page,
        seo=get_page_seo(content, "company"),
        sections=resolve_sections(content),
        is_default=content.is_default,
        team=sorted(team, key=lambda member: member.get("order") or 0),
    )


@router.get("/{page_key}", response_model=ContentPage, status_code=status.HTTP_200_OK)
async def content_page(page_key: str, service: BackendAPIService = Depends(get_backend_service)):
    """Generic CMS page (home, services, industries, contact, privacy, terms, ...)."""
    content = await get_page_content(page_key, service)
    return ContentPage(
        page=content.page,
        seo=get_page_seo(content, page_key),
        sections=resolve_sections(content),
        is_default=content.is_default,
    )
