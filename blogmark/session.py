"""
Editor session value.

Holds the live document, the targeted Block and the image attribution hint
as one immutable value. Every operation returns a new session; the document
conversion, segmentation and insertion calls stay pure.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from . import converter_api
from .exceptions import ValidationError
from .models import Document, Format, MediaReference

logger = logging.getLogger('blogmark')


@dataclass(frozen=True)
class EditorSession:
    """The editor state: ``{document, selection}`` plus the keyword hint."""
    document: Document
    selection: Optional[int] = None
    attribution_hint: Optional[str] = None

    @classmethod
    def from_generated(cls, markdown: str, keyword: Optional[str] = None) -> "EditorSession":
        """Start a session from a generated draft, which is always Markdown."""
        return cls(document=Document(text=markdown, format=Format.MARKDOWN), attribution_hint=keyword)

    @property
    def format(self) -> Format:
        return self.document.format

    @property
    def blocks(self):
        return converter_api.segment(self.document)

    def edit(self, text: str) -> "EditorSession":
        """Replace the text with a user edit in the displayed format."""
        return self._with_document(self.document.with_text(text))

    def switch_format(self, target_format) -> "EditorSession":
        """Convert the displayed document to ``target_format``."""
        converted = converter_api.convert(self.document, target_format, self.attribution_hint)
        return self._with_document(converted)

    def select(self, block_index: int) -> "EditorSession":
        """Target one Block for the next insertion."""
        count = len(self.blocks)
        if isinstance(block_index, bool) or not isinstance(block_index, int) \
                or not 0 <= block_index < count:
            raise ValidationError(f"Cannot select block {block_index!r} (document has {count} blocks)")
        return replace(self, selection=block_index)

    def insert_media(self, media_ref: MediaReference, block_index: Optional[int] = None) -> "EditorSession":
        """Insert an image after ``block_index``, or after the selected Block.

        Raises:
            ValidationError: If no valid Block is targeted or the address is empty.
        """
        if block_index is None:
            block_index = self.selection
        document = converter_api.plan_insertion(self.blocks, block_index, media_ref, self.format)
        return self._with_document(document)

    def _with_document(self, document: Document) -> "EditorSession":
        selection = self.selection
        if selection is not None:
            count = len(converter_api.segment(document))
            if selection >= count:
                logger.debug("Clearing stale selection %d (document now has %d blocks)", selection, count)
                selection = None
        return replace(self, document=document, selection=selection)
