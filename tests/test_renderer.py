"""Tests for the Markdown portfolio renderer."""

from collate.reporting import render_document, render_excerpt
from collate.segmentation import Excerpt
from collate.utils import FileKind


def code_excerpt(text="void a() {}\n", path="src/A.java"):
    return Excerpt(file_path=path, kind=FileKind.CODE, syntax="java", text=text, start_line=1, end_line=1)


def doc_excerpt(text="# Title\n\nbody\n", path="README.md"):
    return Excerpt(file_path=path, kind=FileKind.DOCUMENT, syntax="markdown", text=text, start_line=1, end_line=3)


class TestRenderExcerpt:
    def test_code_is_fenced_with_syntax(self):
        assert render_excerpt(code_excerpt()) == (
            "###### src/A.java\n\n"
            "``` java\n"
            "void a() {}\n"
            "```\n"
        )

    def test_document_is_indented(self):
        assert render_excerpt(doc_excerpt()) == (
            "###### README.md\n\n"
            "    # Title\n"
            "    \n"
            "    body\n"
        )

    def test_document_with_fence_is_not_fenced(self):
        rendered = render_excerpt(doc_excerpt("# T\n```\ncode\n```\n"))
        assert "\n```" not in rendered
        assert "    ```\n" in rendered

    def test_document_line_with_form_feed_stays_one_line(self):
        rendered = render_excerpt(doc_excerpt("# T\npage\x0cbreak \u2028 here\n"))
        assert rendered.endswith("    # T\n    page\x0cbreak \u2028 here\n")


class TestRenderDocument:
    def test_heading_names_author(self):
        assert render_document("alice@example.com", []) == "# alice@example.com\n\n"

    def test_excerpts_in_order(self):
        out = render_document("a@b.c", [code_excerpt(path="one.java"), doc_excerpt(path="two.md")])
        assert out.startswith("# a@b.c\n\n###### one.java\n\n")
        assert out.index("one.java") < out.index("two.md")
