"""
Proxy router
Same-origin routes the browser calls; each one forwards to the backend API and
relays the upstream status code and JSON body unchanged.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote
import logging

from app.apps.backend.exceptions import BackendAPIError
from app.apps.backend.services import BackendAPIService, get_backend_service

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR = {"error": "Internal server error"}


def blog_upstream(query: Dict[str, str]) -> Tuple[str, Optional[Dict[str, str]]]:
    """Map inbound blog filters to the upstream path and query."""
    featured = query.get("featured")
    if featured:
        return "/api/blog", {"featured": featured}
    return "/api/blog", None


def case_studies_upstream(query: Dict[str, str]) -> Tuple[str, Optional[Dict[str, str]]]:
    """
    slug wins over featured, which wins over industry:
      ?slug=x      -> /api/case-studies/x
      ?featured=1  -> /api/case-studies/featured
      ?industry=y  -> /api/case-studies?industry=y
    """
    slug = query.get("slug")
    if slug:
        return f"/api/case-studies/{quote(slug, safe='')}", None
    if query.get("featured"):
        return "/api/case-studies/featured", None
    industry = query.get("industry")
    if industry:
        return "/api/case-studies", {"industry": industry}
    return "/api/case-studies", None


async def _relay(
    label: str,
    service: BackendAPIService,
    path: str,
    method: str = "GET",
    *,
    params: Optional[Dict[str, str]] = None,
    json: Any = None,
    token: Optional[str] = None,
) -> JSONResponse:
    try:
        upstream = await service.fetch(path, method, params=params, json=json, token=token)
    except BackendAPIError as e:
        logger.error(f"{label} API error: {e}")
        return JSONResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(upstream.payload, status_code=upstream.status_code)


async def _forward_post(label: str, request: Request, service: BackendAPIService, path: str) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError as e:
        logger.error(f"{label} API error: invalid request body: {e}")
        return JSONResponse(INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    token = None
    authorization = request.headers.get("Authorization")
    if authorization and authorization.startswith("Bearer "):
        token = authorization[7:]

    return await _relay(label, service, path, "POST", json=body, token=token)


@router.get("/blog")
async def proxy_blog_list(request: Request, service: BackendAPIService = Depends(get_backend_service)):
    path, params = blog_upstream(dict(request.query_params))
    return await _relay("Blog", service, path, params=params)


@router.post("/blog")
async def proxy_blog_create(request: Request, service: BackendAPIService = Depends(get_backend_service)):
    return await _forward_post("Blog", request, service, "/api/blog")


@router.get("/case-studies")
async def proxy_case_studies_list(request: Request, service: BackendAPIService = Depends(get_backend_service)):
    path, params = case_studies_upstream(dict(request.query_params))
    return await _relay("Case Studies", service, path, params=params)


@router.post("/case-studies")
async def proxy_case_studies_create(request: Request, service: BackendAPIService = Depends(get_backend_service)):
    return await _forward_post("Case Studies", request, service, "/api/case-studies")


@router.post("/contact")
async def proxy_contact(request: Request, service: BackendAPIService = Depends(get_backend_service)):
    """Contact form submission."""
    return await _forward_post("Contact", request, service, "/api/contact")
