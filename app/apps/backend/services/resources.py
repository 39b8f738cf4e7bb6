"""
Resource helpers for the admin dashboard
Each helper wraps one upstream resource and always sends the admin bearer token.
"""
from typing import Any, Dict, List, Optional
import logging

from app.apps.backend.exceptions import BackendStatusError
from app.apps.backend.services.api_service import BackendAPIService

logger = logging.getLogger(__name__)


class ResourceAPI:
    """
    CRUD calls for one entity collection.

    base_path:  e.g. "/api/blog"
    admin_list_path: listing endpoint that includes drafts/inactive records,
        e.g. "/api/blog/admin/all". Defaults to base_path.
    admin_get_path: prefix for fetching one record by id whatever its status,
        e.g. "/api/blog/admin". Defaults to base_path.
    list_params: extra query params always sent with list(),
        e.g. {"status": "all"} for the team listing.
    """

    def __init__(
        self,
        base_path: str,
        admin_list_path: Optional[str] = None,
        admin_get_path: Optional[str] = None,
        list_params: Optional[Dict[str, Any]] = None,
    ):
        self.base_path = base_path
        self.admin_list_path = admin_list_path or base_path
        self.admin_get_path = admin_get_path or base_path
        self.list_params = list_params or {}

    async def list(
        self,
        service: BackendAPIService,
        token: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = dict(self.list_params)
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        if status:
            params["status"] = status
        return await service.request(self.admin_list_path, params=params or None, token=token)

    async def get(self, service: BackendAPIService, token: str, entity_id: str) -> Dict[str, Any]:
        return await service.request(f"{self.admin_get_path}/{entity_id}", token=token)

    async def create(self, service: BackendAPIService, token: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await service.request(self.base_path, "POST", json=data, token=token)

    async def update(
        self, service: BackendAPIService, token: str, entity_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{entity_id}", "PUT", json=data, token=token)

    async def delete(self, service: BackendAPIService, token: str, entity_id: str) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{entity_id}", "DELETE", token=token)

    async def reorder(
        self, service: BackendAPIService, token: str, orders: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        return await service.request(
            f"{self.base_path}/reorder", "PUT", json={"orders": orders}, token=token
        )


class ContentAPI:
    """Page content CMS endpoints (all require an admin session)."""

    base_path = "/api/content"

    async def list_pages(self, service: BackendAPIService, token: str) -> Dict[str, Any]:
        return await service.request(self.base_path, token=token)

    async def get_page(self, service: BackendAPIService, token: str, page: str) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}", token=token)

    async def get_section(
        self, service: BackendAPIService, token: str, page: str, section: str
    ) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}/{section}", token=token)

    async def get_structure(self, service: BackendAPIService, token: str, page: str) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}/structure", token=token)

    async def update_page(
        self, service: BackendAPIService, token: str, page: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}", "PUT", json=data, token=token)

    async def update_section(
        self, service: BackendAPIService, token: str, page: str, section: str, content: Any
    ) -> Dict[str, Any]:
        return await service.request(
            f"{self.base_path}/{page}/{section}", "PUT", json=content, token=token
        )

    async def update_seo(
        self, service: BackendAPIService, token: str, page: str, seo: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}/seo", "PUT", json=seo, token=token)

    async def delete_section(
        self, service: BackendAPIService, token: str, page: str, section: str
    ) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}/{section}", "DELETE", token=token)

    async def reset_page(self, service: BackendAPIService, token: str, page: str) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/{page}/reset", "POST", token=token)

    async def initialize_defaults(self, service: BackendAPIService, token: str) -> Dict[str, Any]:
        return await service.request(f"{self.base_path}/initialize", "POST", token=token)


class MediaAPI:
    base_path = "/api/media"

    async def upload(
        self,
        service: BackendAPIService,
        token: str,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
        folder: str = "general",
    ) -> str:
        """
        Upload a file and return the stored object's URL.

        Raises BackendStatusError when the upstream answers without a URL.
        """
        response = await service.request(
            self.base_path,
            "POST",
            files={"file": (filename, content, content_type)},
            data={"folder": folder},
            token=token,
        )
        data = response.get("data") if isinstance(response, dict) else None
        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise BackendStatusError("Upload failed", payload=response)

        logger.info(f"Uploaded {filename} to {folder}: {url}")
        return url


blog_api = ResourceAPI(
    "/api/blog",
    admin_list_path="/api/blog/admin/all",
    admin_get_path="/api/blog/admin",
)
case_study_api = ResourceAPI(
    "/api/case-studies",
    admin_list_path="/api/case-studies/admin/all",
    admin_get_path="/api/case-studies/admin",
)
testimonial_api = ResourceAPI("/api/testimonials", admin_list_path="/api/testimonials/admin/all")
team_api = ResourceAPI("/api/team", list_params={"status": "all"})
content_api = ContentAPI()
media_api = MediaAPI()
