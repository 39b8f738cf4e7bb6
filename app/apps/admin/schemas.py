"""
Admin dashboard response schemas
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from app.apps.backend.schemas import Pagination


class ScreenState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    DELETING = "deleting"


class ScreenResult(BaseModel):
    """
    Snapshot of an admin screen after an operation.

    alert: blocking error the user must acknowledge (failed save/delete).
    message: inline, non-blocking notice (failed load, upstream confirmation).
    navigate_to: where the dashboard should go next, if anywhere.
    """
    state: ScreenState
    items: Optional[List[Dict[str, Any]]] = None
    item: Optional[Dict[str, Any]] = None
    pagination: Optional[Pagination] = None
    alert: Optional[str] = None
    message: Optional[str] = None
    navigate_to: Optional[str] = None
    errors: List[str] = Field(default_factory=list)


class ContentPageUpdate(BaseModel):
    sections: Dict[str, Any]
    seo: Optional[Dict[str, Any]] = None
