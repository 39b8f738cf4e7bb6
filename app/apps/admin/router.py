"""
Admin dashboard router
Every route needs an admin session and answers with a ScreenResult snapshot of
the screen after the operation.
"""
from fastapi import APIRouter, Body, Depends, File, Query, UploadFile, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, List, Optional
import logging

from app.apps.admin.dependencies import get_entity, require_admin_token
from app.apps.admin.entities import ENTITIES, EntityConfig
from app.apps.admin.schemas import ContentPageUpdate, ScreenResult
from app.apps.admin.screens import (
    ContentPagesScreen,
    EditScreen,
    FormValidationError,
    ListScreen,
    Screen,
)
from app.apps.backend.schemas import BLOG_CATEGORIES, INDUSTRIES
from app.apps.backend.services import BackendAPIService, get_backend_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _invalid(screen: Screen, error: FormValidationError) -> JSONResponse:
    result = screen.result(errors=error.fields)
    result.alert = error.message
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=result.model_dump(mode="json"),
    )


@router.get("")
async def admin_shell(token: str = Depends(require_admin_token)):
    """Dashboard navigation."""
    return {
        "screens": [
            {"name": config.name, "label": config.label, "path": config.list_path}
            for config in ENTITIES.values()
        ]
        + [{"name": "content", "label": "page content", "path": "/admin/content"}],
        "options": {"blogCategories": BLOG_CATEGORIES, "industries": INDUSTRIES},
    }


# Content pages. Declared before the generic entity routes so "content" is
# never taken as an entity name.

@router.get("/api/content", response_model=ScreenResult)
async def list_content_pages(
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.list_pages()
    return screen.result()


@router.post("/api/content/initialize", response_model=ScreenResult)
async def initialize_content(
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    if await screen.initialize_defaults():
        await screen.list_pages()
    return screen.result()


@router.get("/api/content/{page}", response_model=ScreenResult)
async def load_content_page(
    page: str,
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.load_page(page)
    return screen.result()


@router.put("/api/content/{page}", response_model=ScreenResult)
async def save_content_page(
    page: str,
    update: ContentPageUpdate,
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.save_page(page, update.sections, update.seo)
    return screen.result()


@router.put("/api/content/{page}/seo", response_model=ScreenResult)
async def save_content_seo(
    page: str,
    seo: Dict[str, Any] = Body(...),
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.save_seo(page, seo)
    return screen.result()


@router.get("/api/content/{page}/sections/{section}", response_model=ScreenResult)
async def load_content_section(
    page: str,
    section: str,
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.load_section(page, section)
    return screen.result()


@router.put("/api/content/{page}/sections/{section}", response_model=ScreenResult)
async def save_content_section(
    page: str,
    section: str,
    content: Any = Body(...),
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.save_section(page, section, content)
    return screen.result()


@router.delete("/api/content/{page}/sections/{section}", response_model=ScreenResult)
async def delete_content_section(
    page: str,
    section: str,
    confirm: bool = Query(False),
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    if await screen.delete_section(page, section, confirmed=confirm):
        await screen.load_page(page)
    return screen.result()


@router.post("/api/content/{page}/reset", response_model=ScreenResult)
async def reset_content_page(
    page: str,
    confirm: bool = Query(False),
    token: str = Depends(require_admin_token),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ContentPagesScreen(service, token)
    await screen.reset_page(page, confirmed=confirm)
    return screen.result()


# Entity screens (blog, case-studies, testimonials, team)

@router.get("/api/{entity}", response_model=ScreenResult)
async def list_entities(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    status_filter: Optional[str] = Query(None, alias="status"),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ListScreen(config, service, token)
    await screen.load(page, limit, status_filter)
    return screen.result()


@router.get("/api/{entity}/new", response_model=ScreenResult)
async def new_entity_form(
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = EditScreen(config, service, token)
    await screen.load()
    return screen.result()


@router.get("/api/{entity}/{entity_id}", response_model=ScreenResult)
async def load_entity(
    entity_id: str,
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = EditScreen(config, service, token)
    await screen.load(entity_id)
    return screen.result()


@router.post("/api/{entity}", response_model=ScreenResult)
async def create_entity(
    form: Dict[str, Any] = Body(...),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = EditScreen(config, service, token)
    try:
        await screen.submit(form)
    except FormValidationError as e:
        return _invalid(screen, e)
    return screen.result()


@router.put("/api/{entity}/{entity_id}", response_model=ScreenResult)
async def update_entity(
    entity_id: str,
    form: Dict[str, Any] = Body(...),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = EditScreen(config, service, token)
    try:
        await screen.submit(form, entity_id)
    except FormValidationError as e:
        return _invalid(screen, e)
    return screen.result()


@router.delete("/api/{entity}/{entity_id}", response_model=ScreenResult)
async def delete_entity(
    entity_id: str,
    confirm: bool = Query(False),
    page: int = Query(1, ge=1),
    status_filter: Optional[str] = Query(None, alias="status"),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    """Delete then re-fetch the current list page. Without ?confirm=true nothing is sent."""
    screen = ListScreen(config, service, token)
    screen.set_filters(page, status=status_filter)
    await screen.delete(entity_id, confirmed=confirm)
    return screen.result()


@router.post("/api/{entity}/{entity_id}/toggle/{field}", response_model=ScreenResult)
async def toggle_entity_field(
    entity_id: str,
    field: str,
    page: int = Query(1, ge=1),
    status_filter: Optional[str] = Query(None, alias="status"),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    screen = ListScreen(config, service, token)
    screen.set_filters(page, status=status_filter)
    try:
        await screen.toggle(entity_id, field)
    except FormValidationError as e:
        return _invalid(screen, e)
    return screen.result()


@router.post("/api/{entity}/reorder", response_model=ScreenResult)
async def reorder_entities(
    orders: List[Dict[str, Any]] = Body(..., embed=True),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    """Body: {"orders": [{"id": ..., "order": n}, ...]}"""
    screen = ListScreen(config, service, token)
    try:
        await screen.reorder(orders)
    except FormValidationError as e:
        return _invalid(screen, e)
    return screen.result()


@router.post("/api/{entity}/uploads/{field}", response_model=ScreenResult)
async def upload_entity_file(
    field: str,
    file: UploadFile = File(...),
    token: str = Depends(require_admin_token),
    config: EntityConfig = Depends(get_entity),
    service: BackendAPIService = Depends(get_backend_service),
):
    """Upload an image; the stored URL comes back in item[field] for the form."""
    screen = EditScreen(config, service, token)
    content = await file.read()
    try:
        await screen.upload(
            field,
            file.filename or "upload",
            content,
            file.content_type or "application/octet-stream",
        )
    except FormValidationError as e:
        return _invalid(screen, e)
    return screen.result()
