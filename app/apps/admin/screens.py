"""
Admin screen controllers
Each controller owns one screen's state (loading, ready, saving, deleting) and
the alert/message/navigation side effects the dashboard shows.

Auth failures (BackendAuthError) are never absorbed here; they propagate to the
shell, which sends the user to the login page.
"""
from typing import Any, Dict, List, Optional
import asyncio
import logging

from pydantic import ValidationError

from app.apps.admin.entities import EntityConfig, fill_slug
from app.apps.admin.schemas import ScreenResult, ScreenState
from app.apps.backend.exceptions import BackendAPIError, BackendAuthError
from app.apps.backend.schemas import Envelope, Pagination
from app.apps.backend.services import BackendAPIService, content_api, media_api

logger = logging.getLogger(__name__)


class FormValidationError(Exception):
    """Raised before any network call when a form is incomplete or malformed."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []


def _record_id(record: Dict[str, Any]) -> Optional[str]:
    return record.get("_id") or record.get("id")


def _data(response: Any) -> Any:
    """The `data` member of a backend envelope, or None when the body is not an object."""
    return response.get("data") if isinstance(response, dict) else None


def _record(response: Any) -> Optional[Dict[str, Any]]:
    data = _data(response)
    return data if isinstance(data, dict) else None


class Screen:
    def __init__(self, service: BackendAPIService, token: str):
        self.service = service
        self.token = token
        self.state = ScreenState.LOADING
        self.history: List[ScreenState] = [ScreenState.LOADING]
        self.alert: Optional[str] = None
        self.message: Optional[str] = None
        self.navigate_to: Optional[str] = None

    def transition(self, state: ScreenState) -> None:
        self.state = state
        self.history.append(state)

    def result(self, **extra) -> ScreenResult:
        return ScreenResult(
            state=self.state,
            alert=self.alert,
            message=self.message,
            navigate_to=self.navigate_to,
            **extra,
        )


class ListScreen(Screen):
    """Paginated entity table with delete and in-place toggles."""

    def __init__(self, config: EntityConfig, service: BackendAPIService, token: str):
        super().__init__(service, token)
        self.config = config
        self.items: List[Dict[str, Any]] = []
        self.pagination: Optional[Pagination] = None
        self.set_filters()

    def set_filters(self, page: int = 1, limit: Optional[int] = None, status: Optional[str] = None) -> None:
        """Filters used by load() and by the re-fetch after a mutation."""
        self._filters = {"page": page, "limit": limit or self.config.page_size, "status": status}

    async def load(self, page: int = 1, limit: Optional[int] = None, status: Optional[str] = None):
        self.set_filters(page, limit, status)
        self.transition(ScreenState.LOADING)
        try:
            response = await self.config.api.list(self.service, self.token, **self._filters)
            envelope = Envelope.model_validate(response)
        except BackendAuthError:
            raise
        except (BackendAPIError, ValidationError) as e:
            logger.error(f"Error fetching {self.config.name}: {e}")
            self.items = []
            self.pagination = None
            self.message = f"Failed to load {self.config.label} list"
        else:
            self.items = envelope.data if isinstance(envelope.data, list) else []
            self.pagination = envelope.pagination
        self.transition(ScreenState.READY)

    async def _reload(self) -> None:
        await self.load(**self._filters)

    async def delete(self, entity_id: str, confirmed: bool = False) -> bool:
        """Delete one record. Nothing is sent unless the user confirmed."""
        if not confirmed:
            self.transition(ScreenState.READY)
            return False

        self.transition(ScreenState.DELETING)
        try:
            await self.config.api.delete(self.service, self.token, entity_id)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error deleting {self.config.name} {entity_id}: {e}")
            self.alert = f"Failed to delete {self.config.label}"
            self.transition(ScreenState.READY)
            return False

        logger.info(f"Deleted {self.config.name} {entity_id}")
        await self._reload()
        return True

    async def _current_value(self, entity_id: str, field: str) -> Any:
        for item in self.items:
            if _record_id(item) == entity_id:
                return item.get(field)
        response = await self.config.api.get(self.service, self.token, entity_id)
        return (_record(response) or {}).get(field)

    async def toggle(self, entity_id: str, field: str) -> bool:
        if field not in self.config.toggle_fields:
            raise FormValidationError(f"{field} cannot be toggled", [field])

        self.transition(ScreenState.SAVING)
        try:
            current = await self._current_value(entity_id, field)
            value = self.config.toggled_value(field, current)
            await self.config.api.update(self.service, self.token, entity_id, {field: value})
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error toggling {field} on {self.config.name} {entity_id}: {e}")
            self.alert = f"Failed to update {self.config.label}"
            self.transition(ScreenState.READY)
            return False

        logger.info(f"Set {field}={value!r} on {self.config.name} {entity_id}")
        await self._reload()
        return True

    async def reorder(self, orders: List[Dict[str, Any]]) -> bool:
        """orders: [{"id": ..., "order": n}, ...]"""
        if not self.config.reorderable:
            raise FormValidationError(f"{self.config.label} records cannot be reordered")

        self.transition(ScreenState.SAVING)
        try:
            await self.config.api.reorder(self.service, self.token, orders)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error reordering {self.config.name}: {e}")
            self.alert = f"Failed to reorder {self.config.label} list"
            self.transition(ScreenState.READY)
            return False

        await self._reload()
        return True

    def result(self, **extra) -> ScreenResult:
        return super().result(items=self.items, pagination=self.pagination, **extra)


class EditScreen(Screen):
    """Create/edit form for one entity."""

    def __init__(self, config: EntityConfig, service: BackendAPIService, token: str):
        super().__init__(service, token)
        self.config = config
        self.form: Dict[str, Any] = {}
        self.entity_id: Optional[str] = None

    async def load(self, entity_id: Optional[str] = None) -> None:
        self.entity_id = entity_id
        if entity_id is None:
            self.form = self.config.blank_form()
            self.transition(ScreenState.READY)
            return

        try:
            response = await self.config.api.get(self.service, self.token, entity_id)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error fetching {self.config.name} {entity_id}: {e}")
            self.alert = f"Failed to load {self.config.label}"
            self.navigate_to = self.config.list_path
        else:
            record = _record(response)
            if record is None:
                logger.error(f"Unexpected {self.config.name} {entity_id} payload: {response!r}")
                self.alert = f"Failed to load {self.config.label}"
                self.navigate_to = self.config.list_path
            else:
                self.form = record
        self.transition(ScreenState.READY)

    def validate(self, form: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check required fields, then run the entity's form preparation and schema.
        An empty slug is filled from the title before the required check.

        Returns the payload to send. Raises FormValidationError.
        """
        form = dict(form)
        fill_slug(form)
        missing = self.config.missing_fields(form)
        if missing:
            raise FormValidationError("Please fill in all required fields", missing)

        try:
            payload = self.config.prepare(form)
            self.config.schema.model_validate(payload)
        except ValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise FormValidationError("Some fields are invalid", fields) from e
        except (TypeError, ValueError) as e:
            raise FormValidationError(f"Some fields are invalid: {e}") from e
        return payload

    async def submit(self, form: Dict[str, Any], entity_id: Optional[str] = None) -> bool:
        entity_id = entity_id or self.entity_id
        self.form = form
        payload = self.validate(form)

        self.transition(ScreenState.SAVING)
        try:
            if entity_id:
                response = await self.config.api.update(self.service, self.token, entity_id, payload)
            else:
                response = await self.config.api.create(self.service, self.token, payload)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error saving {self.config.name}: {e}")
            self.alert = e.message or f"Failed to save {self.config.label}"
            self.transition(ScreenState.READY)
            return False

        self.form = _record(response) or payload
        logger.info(f"Saved {self.config.name} {entity_id or _record_id(self.form)}")
        self.navigate_to = self.config.list_path
        self.transition(ScreenState.READY)
        return True

    async def upload(self, field: str, filename: str, content: bytes, content_type: str) -> Optional[str]:
        """Upload a file for `field` and store the returned URL in the form."""
        folder = self.config.upload_fields.get(field)
        if folder is None:
            raise FormValidationError(f"{field} does not accept uploads", [field])

        self.transition(ScreenState.SAVING)
        try:
            url = await media_api.upload(
                self.service, self.token, filename, content, content_type, folder=folder
            )
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error uploading {filename}: {e}")
            self.alert = "Failed to upload image"
            self.transition(ScreenState.READY)
            return None

        self.form[field] = url
        self.transition(ScreenState.READY)
        return url

    def result(self, **extra) -> ScreenResult:
        return super().result(item=self.form, **extra)


class ContentPagesScreen(Screen):
    """Editor for CMS page content: sections, SEO and reset to defaults."""

    def __init__(self, service: BackendAPIService, token: str):
        super().__init__(service, token)
        self.pages: List[Dict[str, Any]] = []
        self.page: Optional[Dict[str, Any]] = None
        self.structure: Optional[Dict[str, Any]] = None

    async def list_pages(self) -> None:
        try:
            response = await content_api.list_pages(self.service, self.token)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error fetching content pages: {e}")
            self.pages = []
            self.message = "Failed to load pages"
        else:
            data = _data(response)
            self.pages = data if isinstance(data, list) else []
        self.transition(ScreenState.READY)

    async def load_page(self, page: str) -> None:
        results = await asyncio.gather(
            content_api.get_page(self.service, self.token, page),
            content_api.get_structure(self.service, self.token, page),
            return_exceptions=True,
        )
        try:
            # an auth failure on either call wins over any other error
            errors = [r for r in results if isinstance(r, BaseException)]
            errors.sort(key=lambda e: not isinstance(e, BackendAuthError))
            if errors:
                raise errors[0]
            content, structure = results
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error fetching content for {page}: {e}")
            self.message = "Failed to load page content"
        else:
            self.page = _record(content)
            self.structure = _record(structure)
        self.transition(ScreenState.READY)

    async def load_section(self, page: str, section: str) -> None:
        try:
            response = await content_api.get_section(self.service, self.token, page, section)
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"Error fetching section {section} of {page}: {e}")
            self.message = "Failed to load section"
        else:
            self.page = {"page": page, "sections": {section: _data(response)}}
        self.transition(ScreenState.READY)

    async def _mutate(self, state: ScreenState, failure: str, call) -> bool:
        self.transition(state)
        try:
            response = await call
        except BackendAuthError:
            raise
        except BackendAPIError as e:
            logger.error(f"{failure}: {e}")
            self.alert = e.message or failure
            self.transition(ScreenState.READY)
            return False

        data = _record(response)
        if data is not None and "sections" in data:
            self.page = data
        self.message = response.get("message") if isinstance(response, dict) else None
        self.transition(ScreenState.READY)
        return True

    async def save_page(self, page: str, sections: Dict[str, Any], seo: Optional[Dict[str, Any]] = None) -> bool:
        data: Dict[str, Any] = {"sections": sections}
        if seo is not None:
            data["seo"] = seo
        return await self._mutate(
            ScreenState.SAVING,
            "Failed to save content",
            content_api.update_page(self.service, self.token, page, data),
        )

    async def save_section(self, page: str, section: str, content: Any) -> bool:
        return await self._mutate(
            ScreenState.SAVING,
            "Failed to save section",
            content_api.update_section(self.service, self.token, page, section, content),
        )

    async def save_seo(self, page: str, seo: Dict[str, Any]) -> bool:
        return await self._mutate(
            ScreenState.SAVING,
            "Failed to save SEO settings",
            content_api.update_seo(self.service, self.token, page, seo),
        )

    async def delete_section(self, page: str, section: str, confirmed: bool = False) -> bool:
        if not confirmed:
            self.transition(ScreenState.READY)
            return False
        return await self._mutate(
            ScreenState.DELETING,
            "Failed to delete section",
            content_api.delete_section(self.service, self.token, page, section),
        )

    async def reset_page(self, page: str, confirmed: bool = False) -> bool:
        """Restore a page to its bundled defaults. Requires confirmation."""
        if not confirmed:
            self.transition(ScreenState.READY)
            return False
        return await self._mutate(
            ScreenState.SAVING,
            "Failed to reset page",
            content_api.reset_page(self.service, self.token, page),
        )

    async def initialize_defaults(self) -> bool:
        return await self._mutate(
            ScreenState.SAVING,
            "Failed to initialize default content",
            content_api.initialize_defaults(self.service, self.token),
        )

    def result(self, **extra) -> ScreenResult:
        if self.page is not None:
            extra.setdefault("item", {**self.page, "structure": self.structure} if self.structure else self.page)
        return super().result(items=self.pages, **extra)
