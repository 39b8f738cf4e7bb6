"""
CORS middleware configuration
"""
from fastapi.middleware.cors import CORSMiddleware
from app.config import CORS_ALLOWED_ORIGINS, CORS_ALLOW_CREDENTIALS


def setup_cors(app):
    """
    Setup CORS middleware for the site and admin dashboard.

    The admin dashboard sends its bearer token in the Authorization header,
    so that header must be allowed alongside Content-Type.

    Usage:
        from app.middleware.cors import setup_cors
        setup_cors(app)
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )
