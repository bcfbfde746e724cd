import html
import logging
import re

from .config import DEFAULT_CONFIG, derive_attribution

logger = logging.getLogger('blogmark')


class MarkdownToHtml:
    """Rewrites the blog Markdown subset to its HTML subset.

    Two passes: every line is classified as heading, rule, blank or text,
    then text is rewritten by a single left-to-right inline scanner. Syntax
    outside the subset is emitted as escaped literal text; this class never raises.
    """

    HEADER_PATTERN = re.compile(r'^(#{1,6})\s+(.+)$')
    RULE_LINES = ('***', '---', '___')

    # Rendered lines that stay outside any <p> wrapper
    BLOCK_START_PATTERN = re.compile(r'^<(?:h[1-6]|hr|img)\b', re.IGNORECASE)
    ANCHOR_LINE_PATTERN = re.compile(r'^<a\s[^>]*>(?:(?!</a>).)*</a>$', re.IGNORECASE)

    IMAGE_PATTERN = re.compile(r'!\[([^\]\n]*)\]\(([^)\n]*)\)')
    LINK_PATTERN = re.compile(r'\[([^\]\n]*)\]\(([^)\n]*)\)')

    # Characters that can open an inline token
    INLINE_TRIGGERS = frozenset('![*_')

    @staticmethod
    def convert_text(text, attribution_hint=None, config=None):
        """
        Convert Markdown text to HTML.

        Args:
            text: Markdown source
            attribution_hint: Free text whose first two tokens label images
            config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

        Returns:
            The HTML string.
        """
        converter = MarkdownToHtml(attribution_hint=attribution_hint, config=config)
        return converter.convert(text)

    def __init__(self, attribution_hint=None, config=None):
        self.config = config or DEFAULT_CONFIG
        self.attribution = derive_attribution(attribution_hint, self.config)
        self.output = []
        self.paragraph_lines = []

    def convert(self, text):
        self.output = []
        self.paragraph_lines = []
        if not text:
            return ""

        lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
        for line in lines:
            self._consume_line(line)
        self._flush_paragraph()

        return '\n'.join(self._collapse_blank_runs(self.output))

    def _consume_line(self, line):
        stripped = line.strip()
        if not stripped:
            self._flush_paragraph()
            self.output.append('')
            return

        match = self.HEADER_PATTERN.match(stripped)
        if match:
            self._flush_paragraph()
            self.output.append(self._handle_header(len(match.group(1)), match.group(2).strip()))
            return

        if stripped in self.RULE_LINES:
            self._flush_paragraph()
            self.output.append('<hr />')
            return

        rendered = self._process_inlines(stripped)
        if self._is_block_level(rendered):
            self._flush_paragraph()
            self.output.append(rendered)
            return

        self.paragraph_lines.append(rendered)

    def _is_block_level(self, rendered):
        return bool(
            self.BLOCK_START_PATTERN.match(rendered)
            or self.ANCHOR_LINE_PATTERN.match(rendered)
        )

    def _flush_paragraph(self):
        if not self.paragraph_lines:
            return
        self.output.append(f"<p>{self.config.SOFT_BREAK.join(self.paragraph_lines)}</p>")
        self.paragraph_lines = []

    def _collapse_blank_runs(self, lines):
        result = []
        run = 0
        for line in lines + [None]:
            if line == '':
                run += 1
                continue
            if run:
                keep = 1 if run > self.config.MAX_BLANK_LINE_RUN else run
                result.extend([''] * keep)
                run = 0
            if line is not None:
                result.append(line)
        return result

    def _handle_header(self, level, text):
        return f"<h{level}>{self._process_inlines(text)}</h{level}>"

    # --- Inline scanner ---

    def _process_inlines(self, text):
        result = []
        idx = 0
        while idx < len(text):
            token = None
            if text[idx] in self.INLINE_TRIGGERS:
                token = self._try_inline_token(text, idx)
            if token is None:
                result.append(_text(text[idx]))
                idx += 1
                continue
            rendered, idx = token
            result.append(rendered)
        return ''.join(result)

    def _try_inline_token(self, text, idx):
        # Longest delimiter first, so a doubled delimiter never opens an italic run
        for parser in (
            self._try_image,
            self._try_link,
            self._try_bold_italic,
            self._try_bold,
            self._try_italic,
        ):
            token = parser(text, idx)
            if token is not None:
                return token
        return None

    def _try_image(self, text, idx):
        match = self.IMAGE_PATTERN.match(text, idx)
        if not match:
            return None
        alt_text, src = match.group(1), match.group(2).strip()
        if not src.startswith(self.config.IMAGE_SOURCE_PREFIXES):
            logger.debug("Leaving image reference with unsupported source as text: %s", src)
            return _text(match.group(0)), match.end()
        return self._handle_image(alt_text, src), match.end()

    def _try_link(self, text, idx):
        match = self.LINK_PATTERN.match(text, idx)
        if not match:
            return None
        label, href = match.group(1), match.group(2).strip()
        return f'<a href="{_attr(href)}">{self._process_inlines(label)}</a>', match.end()

    def _try_bold_italic(self, text, idx):
        delimiter = text[idx:idx + 3]
        if delimiter not in ('***', '___'):
            return None
        token = self._try_delimited(text, idx, delimiter, 'em')
        if token is None:
            return None
        rendered, end = token
        return f"<strong>{rendered}</strong>", end

    def _try_bold(self, text, idx):
        delimiter = text[idx:idx + 2]
        if delimiter not in ('**', '__'):
            return None
        return self._try_delimited(text, idx, delimiter, 'strong')

    def _try_italic(self, text, idx):
        if text[idx] not in ('*', '_'):
            return None
        return self._try_delimited(text, idx, text[idx], 'em')

    def _try_delimited(self, text, idx, delimiter, tag):
        start = idx + len(delimiter)
        end = self._find_closer(text, start, delimiter)
        if end == -1:
            return None
        inner = text[start:end]
        if not inner or inner[0].isspace() or inner[-1].isspace():
            return None
        return f"<{tag}>{self._process_inlines(inner)}</{tag}>", end + len(delimiter)

    def _find_closer(self, text, start, delimiter):
        if len(delimiter) > 1:
            return text.find(delimiter, start)
        # A single delimiter closes only on a run of length one; **x** inside *...* is skipped
        pos = start
        while True:
            pos = text.find(delimiter, pos)
            if pos == -1:
                return -1
            run_end = pos
            while run_end < len(text) and text[run_end] == delimiter:
                run_end += 1
            if run_end - pos == 1:
                return pos
            pos = run_end

    def _handle_image(self, alt_text, src):
        attribution_attr = self.config.ATTRIBUTION_ATTRIBUTE
        return (
            f'<img src="{_attr(src)}" alt="{_attr(alt_text)}" '
            f'{attribution_attr}="{_attr(self.attribution)}" />'
        )


def _attr(value):
    return html.escape(value, quote=True)


def _text(value):
    return html.escape(value, quote=False)
