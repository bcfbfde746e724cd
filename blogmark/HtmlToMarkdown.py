import logging
import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.element import CData, Declaration, Doctype, ProcessingInstruction

from .config import DEFAULT_CONFIG, markdown_alt_text

logger = logging.getLogger('blogmark')


class HtmlToMarkdown:
    """Flattens the blog HTML subset back to Markdown.

    The markup is parsed with BeautifulSoup and the tree is walked once.
    Elements of the subset are rewritten, block containers outside it become
    line boundaries, and every other tag is unwrapped to its text. This is
    best-effort flattening, not a sanitizer.
    """

    BLANK_RUN_PATTERN = re.compile(r'\n{3,}')

    HEADING_TAGS = {f'h{level}': level for level in range(1, 7)}
    BOLD_TAGS = ('strong', 'b')
    ITALIC_TAGS = ('em', 'i')

    # Containers whose boundaries separate the text on either side
    BLOCK_TAGS = frozenset([
        'address', 'article', 'aside', 'blockquote', 'body', 'dd', 'details',
        'div', 'dl', 'dt', 'fieldset', 'figcaption', 'figure', 'footer', 'form',
        'header', 'html', 'li', 'main', 'nav', 'ol', 'pre', 'section', 'summary',
        'table', 'tbody', 'tfoot', 'thead', 'tr', 'ul',
    ])
    CELL_TAGS = ('td', 'th')
    DROPPED_TAGS = ('script', 'style', 'template')
    SKIPPED_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

    @staticmethod
    def convert_text(text, config=None):
        """
        Convert HTML text to Markdown.

        Args:
            text: HTML source
            config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

        Returns:
            The Markdown string, one paragraph per line separated by blank lines.
        """
        return HtmlToMarkdown(config=config).convert(text)

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG

    def convert(self, text):
        if not text:
            return ""

        soup = BeautifulSoup(text.replace('\r\n', '\n'), 'html.parser')
        markdown = self._render_children(soup)

        return self._normalize(markdown)

    def _render_children(self, element):
        return ''.join(self._render_node(child) for child in element.children)

    def _render_node(self, node):
        if isinstance(node, self.SKIPPED_STRINGS):
            return ''
        if isinstance(node, NavigableString):
            # Entities were already decoded by the parser
            return str(node)
        if isinstance(node, Tag):
            return self._render_tag(node)
        return ''

    def _render_tag(self, tag):
        name = tag.name

        if name == 'br':
            return '\n'
        if name == 'img':
            return self._handle_image(tag)
        if name == 'hr':
            return '\n---\n'
        if name in self.DROPPED_TAGS:
            return ''

        inner = self._render_children(tag)

        if name in self.HEADING_TAGS:
            return '\n' + '#' * self.HEADING_TAGS[name] + ' ' + inner + '\n'
        if name in self.BOLD_TAGS:
            return self._wrap(inner, '**')
        if name in self.ITALIC_TAGS:
            return self._wrap(inner, '*')
        if name == 'p':
            return '\n' + inner + self.config.PARAGRAPH_SEPARATOR
        if name == 'a':
            href = tag.get('href')
            if href is None:
                return inner
            return f'[{inner}]({href})'
        if name in self.BLOCK_TAGS:
            return '\n' + inner + '\n'
        if name in self.CELL_TAGS:
            return ' ' + inner + ' '

        return inner

    def _wrap(self, inner, delimiter):
        stripped = inner.strip()
        if not stripped:
            return inner
        # Emphasis runs cannot start or end with whitespace
        leading = inner[:len(inner) - len(inner.lstrip())]
        trailing = inner[len(inner.rstrip()):]
        return f'{leading}{delimiter}{stripped}{delimiter}{trailing}'

    def _handle_image(self, tag):
        src = tag.get('src') or ''
        if not src:
            logger.debug("Dropping <img> element without src")
            return ''
        return f"![{markdown_alt_text(tag.get('alt') or '')}]({src})"

    def _normalize(self, markdown):
        lines = [line.strip() for line in markdown.split('\n')]
        text = self.config.PARAGRAPH_SEPARATOR.join(line for line in lines if line)
        return self.BLANK_RUN_PATTERN.sub('\n\n', text)
