"""
blogmark - Markdown/HTML conversion and paragraph addressing for blog drafts

This package converts blog drafts between a Markdown subset and an HTML
subset, splits them into addressable paragraph Blocks, and inserts images
after a chosen paragraph.
"""

from .MarkdownToHtml import MarkdownToHtml
from .HtmlToMarkdown import HtmlToMarkdown
from .segmenter import ParagraphSegmenter
from .insertion import InsertionPlanner
from .models import Block, Document, Format, MediaReference
from .session import EditorSession
from .config import ConversionConfig, DEFAULT_CONFIG
from .exceptions import BlogmarkError, ValidationError, SecurityError
from .converter_api import convert, segment, plan_insertion, convert_string, convert_file

__version__ = "0.1.0"
__all__ = [
    "MarkdownToHtml",
    "HtmlToMarkdown",
    "ParagraphSegmenter",
    "InsertionPlanner",
    "Block",
    "Document",
    "Format",
    "MediaReference",
    "EditorSession",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "BlogmarkError",
    "ValidationError",
    "SecurityError",
    "convert",
    "segment",
    "plan_insertion",
    "convert_string",
    "convert_file",
]
