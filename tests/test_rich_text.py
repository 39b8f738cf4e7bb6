"""
Tests for article body block classification
"""
from app.apps.pages.rich_text import classify_block, render_blocks


class TestClassifyBlock:
    def test_headings(self):
        assert classify_block("## Why RevOps").model_dump(exclude_none=True) == {
            "type": "heading2",
            "text": "Why RevOps",
        }
        assert classify_block("### Step one").text == "Step one"
        assert classify_block("### Step one").type == "heading3"

    def test_heading_keeps_bold_markers(self):
        assert classify_block("## **Bold** heading").text == "**Bold** heading"

    def test_emphasis_strips_every_bold_marker(self):
        block = classify_block("**Key takeaway:** align **sales** and marketing")

        assert block.type == "emphasis"
        assert block.text == "Key takeaway: align sales and marketing"

    def test_ordered_list(self):
        block = classify_block("1. Audit the funnel\n2. **Fix** handoffs\n10. Measure")

        assert block.type == "ordered_list"
        assert block.items == ["Audit the funnel", "Fix handoffs", "Measure"]

    def test_unordered_list(self):
        block = classify_block("- CRM hygiene\n- Lead routing\n")

        assert block.type == "unordered_list"
        assert block.items == ["CRM hygiene", "Lead routing"]

    def test_list_item_starting_with_bold_keeps_its_text(self):
        block = classify_block("- Align teams\n**Measure** pipeline\n* **Review** weekly")

        assert block.type == "unordered_list"
        assert block.items == ["Align teams", "Measure pipeline", "Review weekly"]

    def test_paragraph(self):
        block = classify_block("Plain text with **bold** inside.")

        assert block.type == "paragraph"
        assert block.text == "Plain text with bold inside."

    def test_list_marker_needs_trailing_space(self):
        assert classify_block("1.5x growth in a quarter").type == "paragraph"
        assert classify_block("-10% churn").type == "paragraph"


class TestRenderBlocks:
    def test_empty_body(self):
        assert render_blocks(None) == []
        assert render_blocks("") == []

    def test_splits_on_blank_lines(self):
        body = "## Title\n\nIntro paragraph.\n\n- one\n- two\n\n\n\nOutro."

        blocks = render_blocks(body)

        assert [block.type for block in blocks] == [
            "heading2",
            "paragraph",
            "unordered_list",
            "paragraph",
        ]
        assert blocks[-1].text == "Outro."

    def test_windows_line_endings(self):
        blocks = render_blocks("## Title\r\n\r\n1. a\r\n2. b")

        assert blocks[0].text == "Title"
        assert blocks[1].items == ["a", "b"]
