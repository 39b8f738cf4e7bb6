"""
Rich text rendering for article and case study bodies

Bodies are split on blank lines and each chunk is classified by its leading
characters, first match wins:

    "## "   -> heading2
    "### "  -> heading3
    "**"    -> emphasis
    "1. "   -> ordered_list
    "- "    -> unordered_list
    other   -> paragraph

Single pass, no nesting. List items are the chunk's lines with the leading
ordinal or bullet marker removed; bold markers are dropped everywhere except
headings.
"""
import re
from typing import List, Literal, Optional

from pydantic import BaseModel

BlockType = Literal[
    "heading2",
    "heading3",
    "emphasis",
    "ordered_list",
    "unordered_list",
    "paragraph",
]

_LIST_MARKER = re.compile(r"^\s*(?:\d+\.|-|\*(?!\*))\s*")


class RichTextBlock(BaseModel):
    type: BlockType
    text: Optional[str] = None
    items: Optional[List[str]] = None


def _strip_bold(text: str) -> str:
    return text.replace("**", "")


def _list_items(chunk: str) -> List[str]:
    items = []
    for line in chunk.split("\n"):
        item = _strip_bold(_LIST_MARKER.sub("", line, count=1)).strip()
        if item:
            items.append(item)
    return items


def classify_block(chunk: str) -> RichTextBlock:
    if chunk.startswith("## "):
        return RichTextBlock(type="heading2", text=chunk[3:])
    if chunk.startswith("### "):
        return RichTextBlock(type="heading3", text=chunk[4:])
    if chunk.startswith("**"):
        return RichTextBlock(type="emphasis", text=_strip_bold(chunk))
    if chunk.startswith("1. "):
        return RichTextBlock(type="ordered_list", items=_list_items(chunk))
    if chunk.startswith("- "):
        return RichTextBlock(type="unordered_list", items=_list_items(chunk))
    return RichTextBlock(type="paragraph", text=_strip_bold(chunk))


def render_blocks(body: Optional[str]) -> List[RichTextBlock]:
    """Split a free-form body into typed blocks. Empty input gives []."""
    if not body:
        return []

    normalized = body.replace("\r\n", "\n")
    return [
        classify_block(chunk)
        for chunk in normalized.split("\n\n")
        if chunk.strip()
    ]
