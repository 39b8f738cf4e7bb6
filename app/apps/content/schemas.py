"""
Pydantic schemas for resolved page content
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime

from app.apps.backend.schemas import SEOFields


class PageContent(BaseModel):
    """Content record for one page, as seen by renderers."""
    page: str
    sections: Dict[str, Any] = Field(default_factory=dict)
    seo: SEOFields = Field(default_factory=SEOFields)
    updated_at: Optional[datetime] = None
    is_default: bool = False


class PageSEO(BaseModel):
    """SEO metadata after per-page defaults have been applied."""
    title: str
    description: str
    keywords: List[str] = Field(default_factory=list)
    og_image: Optional[str] = None
    canonical_url: Optional[str] = None


class ResolvedPageResponse(BaseModel):
    """Page content response schema"""
    page: str
    sections: Dict[str, Any]
    seo: PageSEO
    is_default: bool
    updated_at: Optional[datetime] = None
