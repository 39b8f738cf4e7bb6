"""
Static per-page defaults used when the CMS has nothing stored for a page
"""
import copy
import json
from pathlib import Path
from typing import Any, Dict

from app.config import SITE_NAME

_DEFAULT_CONTENT_PATH = Path(__file__).resolve().parent / "default_content.json"

with open(_DEFAULT_CONTENT_PATH, encoding="utf-8") as f:
    DEFAULT_CONTENT: Dict[str, Dict[str, Any]] = json.load(f)


DEFAULT_SEO: Dict[str, Dict[str, str]] = {
    "home": {
        "title": f"{SITE_NAME} - Revenue Operations Consulting",
        "description": (
            "Transform your revenue operations with predictable growth systems. "
            "We help B2B companies build scalable revenue engines."
        ),
    },
    "about": {
        "title": f"About - {SITE_NAME}",
        "description": (
            f"Learn about {SITE_NAME}'s mission to help B2B companies build "
            "predictable revenue systems."
        ),
    },
    "services": {
        "title": f"Services - {SITE_NAME}",
        "description": (
            "Revenue Architecture, Sales Process Design, RevOps Implementation, "
            "and Go-to-Market Strategy services."
        ),
    },
    "industries": {
        "title": f"Industries - {SITE_NAME}",
        "description": (
            "Deep expertise across SaaS, Professional Services, Manufacturing, "
            "and Financial Services."
        ),
    },
    "case-studies": {
        "title": f"Case Studies - {SITE_NAME}",
        "description": (
            "Real transformations. Real results. See how we've helped B2B "
            "companies achieve predictable revenue growth."
        ),
    },
    "contact": {
        "title": f"Contact - {SITE_NAME}",
        "description": (
            "Get in touch to discuss your revenue challenges. "
            "We respond within one business day."
        ),
    },
    "company": {
        "title": f"Company - {SITE_NAME}",
        "description": (
            f"Learn about {SITE_NAME}'s mission, values, and approach to "
            "revenue transformation."
        ),
    },
    "privacy": {
        "title": f"Privacy Policy - {SITE_NAME}",
        "description": (
            f"Learn how {SITE_NAME} collects, uses, and protects your personal information."
        ),
    },
    "terms": {
        "title": f"Terms & Conditions - {SITE_NAME}",
        "description": (
            f"Read the terms and conditions for using {SITE_NAME}'s website "
            "and consulting services."
        ),
    },
}

FALLBACK_SEO: Dict[str, str] = {"title": SITE_NAME, "description": ""}


def get_default_content(page: str) -> Dict[str, Any]:
    """Return a copy of the bundled default sections for a page ({} if unknown)."""
    return copy.deepcopy(DEFAULT_CONTENT.get(page.lower(), {}))


def get_default_seo(page: str) -> Dict[str, str]:
    return DEFAULT_SEO.get(page.lower(), FALLBACK_SEO)
