"""
Per-entity configuration for the admin CRUD screens
"""
import copy
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from app.apps.backend.schemas import BlogPost, CaseStudy, TeamMember, Testimonial
from app.apps.backend.services.resources import (
    ResourceAPI,
    blog_api,
    case_study_api,
    team_api,
    testimonial_api,
)


def slugify(title: str) -> str:
    """'Hello, World!' -> 'hello-world'"""
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")


def split_csv(value: Any) -> List[str]:
    """Comma separated form input to a list; lists pass through trimmed."""
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = value
    return [str(part).strip() for part in parts if str(part).strip()]


def _prepare_seo(form: Dict[str, Any], description_field: str) -> Dict[str, Any]:
    seo = dict(form.get("seo") or {})
    seo["metaTitle"] = seo.get("metaTitle") or form.get("title")
    seo["metaDescription"] = seo.get("metaDescription") or form.get(description_field)
    seo["keywords"] = split_csv(seo.get("keywords"))
    return seo


def fill_slug(data: Dict[str, Any]) -> None:
    if not data.get("slug") and data.get("title"):
        data["slug"] = slugify(data["title"])


def prepare_blog(form: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(form)
    fill_slug(data)
    data["tags"] = [tag.lower() for tag in split_csv(data.get("tags"))]
    data["seo"] = _prepare_seo(data, "excerpt")
    if data.get("status") == "published":
        data["publishDate"] = datetime.now(timezone.utc).isoformat()
    else:
        data.pop("publishDate", None)
    return data


def prepare_case_study(form: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(form)
    fill_slug(data)
    data["technologies"] = split_csv(data.get("technologies"))
    data["results"] = [
        result
        for result in data.get("results") or []
        if result.get("metric") and result.get("value")
    ]
    testimonial = data.get("testimonial") or {}
    if not (testimonial.get("quote") and testimonial.get("author")):
        data.pop("testimonial", None)
    data["seo"] = _prepare_seo(data, "challenge")
    return data


def prepare_testimonial(form: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(form)
    if data.get("rating") not in (None, ""):
        data["rating"] = int(data["rating"])
    return data


class EntityConfig:
    """
    Everything a list/edit screen needs to know about one entity type.

    toggle_fields: fields the list screen can flip in place with a
        single-field update. "status" flips between the two status_values,
        any other field is treated as a boolean and inverted.
    upload_fields: form field -> media folder for file uploads.
    """

    def __init__(
        self,
        name: str,
        label: str,
        api: ResourceAPI,
        schema: Type[BaseModel],
        required_fields: List[str],
        blank_form: Dict[str, Any],
        toggle_fields: Optional[List[str]] = None,
        upload_fields: Optional[Dict[str, str]] = None,
        prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
        status_values: Tuple[str, str] = ("active", "inactive"),
        reorderable: bool = False,
        page_size: int = 10,
    ):
        self.name = name
        self.label = label
        self.api = api
        self.schema = schema
        self.required_fields = required_fields
        self._blank_form = blank_form
        self.toggle_fields = toggle_fields or []
        self.upload_fields = upload_fields or {}
        self.prepare = prepare or dict
        self.status_values = status_values
        self.reorderable = reorderable
        self.page_size = page_size

    @property
    def list_path(self) -> str:
        return f"/admin/{self.name}"

    def blank_form(self) -> Dict[str, Any]:
        return copy.deepcopy(self._blank_form)

    def toggled_value(self, field: str, current: Any) -> Any:
        if field == "status":
            on, off = self.status_values
            return off if current == on else on
        return not current

    def missing_fields(self, form: Dict[str, Any]) -> List[str]:
        """Required fields that are absent, None or blank strings."""
        missing = []
        for field in self.required_fields:
            value = form.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        return missing


ENTITIES: Dict[str, EntityConfig] = {
    "blog": EntityConfig(
        name="blog",
        label="blog post",
        api=blog_api,
        schema=BlogPost,
        required_fields=["title", "slug", "excerpt", "content", "category"],
        blank_form={
            "title": "",
            "slug": "",
            "excerpt": "",
            "content": "",
            "category": "General",
            "tags": "",
            "status": "draft",
            "featured": False,
            "featuredImage": None,
            "seo": {"metaTitle": "", "metaDescription": "", "keywords": ""},
        },
        toggle_fields=["featured", "status"],
        upload_fields={"featuredImage": "blog"},
        status_values=("published", "draft"),
        prepare=prepare_blog,
    ),
    "case-studies": EntityConfig(
        name="case-studies",
        label="case study",
        api=case_study_api,
        schema=CaseStudy,
        required_fields=["title", "slug", "industry", "clientName", "challenge", "solution"],
        blank_form={
            "title": "",
            "slug": "",
            "industry": "SaaS",
            "clientName": "",
            "challenge": "",
            "solution": "",
            "results": [{"metric": "", "value": "", "description": ""}],
            "technologies": "",
            "testimonial": {"quote": "", "author": "", "designation": ""},
            "status": "draft",
            "featured": False,
            "featuredImage": None,
            "seo": {"metaTitle": "", "metaDescription": "", "keywords": ""},
        },
        toggle_fields=["featured", "status"],
        upload_fields={"featuredImage": "case-studies"},
        status_values=("published", "draft"),
        prepare=prepare_case_study,
    ),
    "testimonials": EntityConfig(
        name="testimonials",
        label="testimonial",
        api=testimonial_api,
        schema=Testimonial,
        required_fields=["quote", "author"],
        blank_form={
            "quote": "",
            "author": "",
            "designation": "",
            "company": "",
            "avatar": "",
            "rating": 5,
            "featured": False,
            "status": "active",
            "order": 0,
        },
        toggle_fields=["featured", "status"],
        upload_fields={"avatar": "testimonials"},
        prepare=prepare_testimonial,
        reorderable=True,
        page_size=20,
    ),
    "team": EntityConfig(
        name="team",
        label="team member",
        api=team_api,
        schema=TeamMember,
        required_fields=["name", "role"],
        blank_form={
            "name": "",
            "role": "",
            "bio": "",
            "image": "",
            "linkedin": "",
            "twitter": "",
            "email": "",
            "order": 0,
            "status": "active",
        },
        toggle_fields=["status"],
        upload_fields={"image": "team"},
        reorderable=True,
        page_size=50,
    ),
}


def get_entity_config(name: str) -> Optional[EntityConfig]:
    return ENTITIES.get(name)
