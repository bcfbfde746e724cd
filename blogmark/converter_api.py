"""
High-level convenience API for blogmark.

Provides the three document operations used by an owning application,
plus helpers to convert documents stored on disk.
"""

import logging
import os

from .MarkdownToHtml import MarkdownToHtml
from .HtmlToMarkdown import HtmlToMarkdown
from .segmenter import ParagraphSegmenter
from .insertion import InsertionPlanner
from .frontmatter_parser import (
    attribution_hint_from_metadata,
    dump_markdown_with_frontmatter,
    parse_markdown_string_with_frontmatter,
)
from .models import Document, Format
from .config import DEFAULT_CONFIG
from .exceptions import SecurityError, ValidationError

logger = logging.getLogger('blogmark')

EXTENSION_FORMATS = {
    '.md': Format.MARKDOWN,
    '.markdown': Format.MARKDOWN,
    '.html': Format.HTML,
    '.htm': Format.HTML,
}


def convert(document, target_format, attribution_hint=None, config=None):
    """Return ``document`` rewritten wholesale into ``target_format``.

    Converting to the document's own format returns it unchanged.
    """
    target_format = Format.parse(target_format)
    if document.format is target_format:
        return document

    if target_format is Format.HTML:
        text = MarkdownToHtml.convert_text(document.text, attribution_hint, config=config)
    else:
        text = HtmlToMarkdown.convert_text(document.text, config=config)

    logger.debug("Converted %s -> %s (%d -> %d chars)",
                 document.format.value, target_format.value, len(document.text), len(text))
    return Document(text=text, format=target_format)


def segment(document, config=None):
    """Split a document into paragraph Blocks."""
    return ParagraphSegmenter(config).segment(document.text)


def plan_insertion(blocks, block_index, media_ref, format, config=None):
    """Append a media fragment to one Block and return the new Document.

    Raises:
        ValidationError: If the block index is out of range or the address is empty.
    """
    return InsertionPlanner(config).plan(blocks, block_index, media_ref, format)


def convert_string(text, source_format, target_format, attribution_hint=None, config=None):
    """Convert raw text between formats."""
    document = Document(text=text, format=Format.parse(source_format))
    return convert(document, target_format, attribution_hint, config=config).text


def format_for_path(path):
    """Infer a document Format from a file extension."""
    ext = os.path.splitext(path)[1].lower()
    if ext not in EXTENSION_FORMATS:
        raise ValidationError(
            f"Unsupported file type: {ext or path} (expected .md, .markdown, .html or .htm)"
        )
    return EXTENSION_FORMATS[ext]


def load_document(path, config=None):
    """Read a document file.

    Markdown files may start with YAML front matter, which is returned
    separately and is not part of the Document text.

    Returns:
        (Document, metadata_dict)

    Raises:
        ValidationError: If the extension is not a supported format.
        SecurityError: If the file exceeds MAX_INPUT_FILE_SIZE.
    """
    config = config or DEFAULT_CONFIG
    fmt = format_for_path(path)

    size = os.path.getsize(path)
    if size > config.MAX_INPUT_FILE_SIZE:
        raise SecurityError(
            f"Input file too large: {size} bytes (max {config.MAX_INPUT_FILE_SIZE} bytes)"
        )

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    metadata = {}
    if fmt is Format.MARKDOWN:
        metadata, text = parse_markdown_string_with_frontmatter(text)
    return Document(text=text, format=fmt), metadata


def save_document(document, path, metadata=None):
    """Write a document as UTF-8, restoring front matter on Markdown output."""
    text = document.text
    if document.format is Format.MARKDOWN and metadata:
        text = dump_markdown_with_frontmatter(text, metadata)

    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def convert_file(input_path, output_path, target_format=None, attribution_hint=None, config=None):
    """Convert a Markdown or HTML file into the other format.

    Args:
        input_path: Source .md/.markdown/.html/.htm file
        output_path: Destination file
        target_format: Target Format. Inferred from output_path if None.
        attribution_hint: Image attribution hint. Taken from the front matter
                          ``keyword`` or ``title`` if None.
        config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

    Returns:
        The converted Document.
    """
    document, metadata = load_document(input_path, config=config)
    if target_format is None:
        target_format = format_for_path(output_path)
    if attribution_hint is None:
        attribution_hint = attribution_hint_from_metadata(metadata)

    converted = convert(document, target_format, attribution_hint, config=config)
    save_document(converted, output_path, metadata)
    return converted
