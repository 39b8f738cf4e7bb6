"""
Backend services module
"""
from app.apps.backend.services.api_service import (
    BackendAPIService,
    UpstreamResponse,
    backend_service,
    get_backend_service,
)
from app.apps.backend.services.resources import (
    blog_api,
    case_study_api,
    testimonial_api,
    team_api,
    content_api,
    media_api,
)

__all__ = [
    'BackendAPIService',
    'UpstreamResponse',
    'backend_service',
    'get_backend_service',
    'blog_api',
    'case_study_api',
    'testimonial_api',
    'team_api',
    'content_api',
    'media_api',
]
