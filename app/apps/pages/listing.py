"""
Helpers shared by the public listing pages
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def is_published(record: Record) -> bool:
    return record.get("status") == "published"


def published_only(records: List[Record]) -> List[Record]:
    return [record for record in records if is_published(record)]


def partition_featured(records: List[Record]) -> Tuple[List[Record], List[Record]]:
    """Split records into (featured, others), keeping input order in each group."""
    featured = [record for record in records if record.get("featured")]
    others = [record for record in records if not record.get("featured")]
    return featured, others


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string or datetime; naive values are taken as UTC."""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = date_parser.isoparse(str(value))
        except (ValueError, OverflowError):
            logger.warning(f"Unparseable timestamp: {value!r}")
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def display_date(record: Record) -> Optional[datetime]:
    """publishDate, falling back to createdAt."""
    return parse_timestamp(record.get("publishDate")) or parse_timestamp(record.get("createdAt"))


def sort_recent(records: List[Record]) -> List[Record]:
    """
    Newest first by publishDate (or createdAt). Stable for equal dates;
    records with no usable date go last.
    """
    def sort_key(record: Record):
        moment = display_date(record)
        if moment is None:
            return (0, 0.0)
        return (1, moment.timestamp())

    return sorted(records, key=sort_key, reverse=True)
