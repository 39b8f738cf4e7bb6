"""
Pydantic schemas for records owned by the upstream backend
Field names follow the backend's camelCase JSON; extra fields are kept as-is.
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime


BLOG_CATEGORIES = ['Strategy', 'Automation', 'Performance', 'Technology', 'Growth', 'General']

INDUSTRIES = [
    'SaaS',
    'E-commerce',
    'Healthcare',
    'Finance',
    'Education',
    'Manufacturing',
    'Real Estate',
    'Technology',
    'Other',
]

PublishStatus = Literal['draft', 'published', 'archived']
ActiveStatus = Literal['active', 'inactive']


class BackendModel(BaseModel):
    """Base for upstream records: camelCase aliases, unknown fields preserved."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"


class SEOFields(BackendModel):
    # length limits (60/160) are enforced by the backend
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[List[str]] = Field(default_factory=list)
    og_image: Optional[str] = None
    canonical_url: Optional[str] = None


class BlogPost(BackendModel):
    id: Optional[str] = Field(None, alias="_id")
    title: str = Field(..., max_length=200)
    slug: str = Field(..., pattern=r'^[a-z0-9-]+$')
    excerpt: str = Field(..., max_length=300)
    content: str
    category: str = 'General'  # open set, BLOG_CATEGORIES are the known values
    tags: List[str] = Field(default_factory=list)
    status: PublishStatus = 'draft'
    featured: bool = False
    featured_image: Optional[str] = None
    seo: Optional[SEOFields] = None
    author: Optional[Any] = None  # id string or populated {name, email}
    publish_date: Optional[datetime] = None
    read_time: int = 5
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CaseStudyResult(BackendModel):
    metric: str
    value: str
    description: Optional[str] = None


class CaseStudyTestimonial(BackendModel):
    quote: str
    author: str
    designation: Optional[str] = None
    avatar: Optional[str] = None


class CaseStudy(BackendModel):
    id: Optional[str] = Field(None, alias="_id")
    title: str = Field(..., max_length=200)
    slug: str
    industry: str
    client_name: str
    challenge: str
    solution: str
    results: List[CaseStudyResult] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    testimonial: Optional[CaseStudyTestimonial] = None
    featured: bool = False
    status: PublishStatus = 'draft'
    featured_image: Optional[str] = None
    seo: Optional[SEOFields] = None
    publish_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class Testimonial(BackendModel):
    id: Optional[str] = Field(None, alias="_id")
    quote: str = Field(..., max_length=1000)
    author: str = Field(..., max_length=100)
    designation: Optional[str] = Field(None, max_length=100)
    company: Optional[str] = Field(None, max_length=100)
    avatar: Optional[str] = None
    rating: int = Field(5, ge=1, le=5)
    featured: bool = False
    status: ActiveStatus = 'active'
    order: int = 0


class TeamMember(BackendModel):
    id: Optional[str] = Field(None, alias="_id")
    name: str
    role: str
    bio: Optional[str] = None
    image: Optional[str] = None
    status: ActiveStatus = 'active'
    order: int = 0
    # social links are stored flat on the record
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    email: Optional[str] = None


class Pagination(BackendModel):
    page: int = 1
    limit: int = 10
    total: int = 0
    pages: int = 0


class Envelope(BackendModel):
    """Standard upstream response wrapper."""
    success: bool
    data: Optional[Any] = None
    pagination: Optional[Pagination] = None
    message: Optional[str] = None


class StoredPageContent(BackendModel):
    """Page content record as stored upstream."""
    page: str
    sections: Dict[str, Any] = Field(default_factory=dict)
    seo: Optional[SEOFields] = None
    updated_at: Optional[datetime] = None
