"""
View models returned by the public page renderers
Records are passed through as the backend sent them (camelCase dicts).
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime

from app.apps.content.schemas import PageSEO
from app.apps.pages.rich_text import RichTextBlock


class ArticleListingPage(BaseModel):
    """Blog / insights index"""
    seo: PageSEO
    featured: List[Dict[str, Any]]
    posts: List[Dict[str, Any]]
    total: int


class ArticlePage(BaseModel):
    seo: PageSEO
    post: Dict[str, Any]
    blocks: List[RichTextBlock]
    display_date: Optional[datetime] = None
    related: List[Dict[str, Any]] = Field(default_factory=list)


class CaseStudyListingPage(BaseModel):
    seo: PageSEO
    featured: List[Dict[str, Any]]
    others: List[Dict[str, Any]]


class CaseStudyPage(BaseModel):
    seo: PageSEO
    case_study: Dict[str, Any]
    challenge: List[RichTextBlock]
    solution: List[RichTextBlock]


class ContentPage(BaseModel):
    """Any CMS driven page (home, services, contact, ...)"""
    page: str
    seo: PageSEO
    sections: Dict[str, Any]
    is_default: bool


class CompanyPage(ContentPage):
    team: List[Dict[str, Any]]
