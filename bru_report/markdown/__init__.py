"""Markdown report module."""

from bru_report.markdown.reporter import make_markdown_output, write_markdown_to
from bru_report.markdown.writer import MarkdownWriter

__all__ = ["MarkdownWriter", "make_markdown_output", "write_markdown_to"]
