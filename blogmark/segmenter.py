"""
Paragraph segmentation.

Splits a document into the ordered, contiguous list of Blocks used by the
insertion-target picker and by the insertion planner.
"""

import re
from typing import Optional

from .config import ConversionConfig, DEFAULT_CONFIG
from .models import Block

# A line end (LF or CRLF) followed by one or more whitespace-only lines
SEPARATOR_PATTERN = re.compile(r'\r?\n(?:[ \t\r]*\n)+')


def make_label(index: int, text: str, config: Optional[ConversionConfig] = None) -> str:
    """Build the picker preview for the paragraph at ``index``."""
    config = config or DEFAULT_CONFIG
    trimmed = text.strip()
    if not trimmed:
        return config.EMPTY_LABEL_TEMPLATE.format(number=index + 1)
    if len(trimmed) <= config.LABEL_PREVIEW_LENGTH:
        return trimmed
    return trimmed[:config.LABEL_PREVIEW_LENGTH].rstrip() + config.LABEL_ELLIPSIS


class ParagraphSegmenter:
    """Deterministic split of document text into paragraph Blocks."""

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def segment(self, text: str) -> list[Block]:
        """
        Split text on blank lines.

        Leading and trailing separators do not produce Blocks, so empty text
        yields an empty list.

        Args:
            text: Document text in either format

        Returns:
            Blocks with contiguous 0-based indices.
        """
        if not text:
            return []

        pieces = [piece for piece in SEPARATOR_PATTERN.split(text) if piece]
        return [
            Block(index=index, text=piece, label=make_label(index, piece, self.config))
            for index, piece in enumerate(pieces)
        ]

    def join(self, blocks) -> str:
        """Reassemble Block texts with the paragraph separator."""
        return self.config.PARAGRAPH_SEPARATOR.join(block.text for block in blocks)
