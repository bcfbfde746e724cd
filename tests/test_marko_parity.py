"""Cross-checks of the HTML subset against the marko CommonMark renderer."""

import re

import marko
import pytest

from blogmark import MarkdownToHtml

PARITY_DOCUMENTS = [
    "# 제목",
    "###### 작은 제목",
    "Hello **world**, see [here](https://x.com).",
    "__굵게__ 그리고 _기울임_ 그리고 *별표*",
    "# 부동산 시장\n\n금리가 **핵심**입니다.\n\n## 전망\n\n[자료](https://www.reb.or.kr)를 보세요.",
    "첫 단락\n\n---\n\n둘째 단락",
]


def squash(html):
    """Drop whitespace between tags so layout differences do not matter."""
    return re.sub(r">\s+<", "><", html.strip())


def image_pairs(html):
    return sorted(re.findall(r'<img src="([^"]*)" alt="([^"]*)"', html))


class TestMarkoParity:
    """The supported subset renders like CommonMark."""

    @pytest.mark.parametrize("markdown", PARITY_DOCUMENTS)
    def test_same_markup(self, markdown: str):
        """Test that headings, paragraphs, emphasis and links match marko."""
        assert squash(MarkdownToHtml.convert_text(markdown)) == squash(marko.convert(markdown))

    def test_same_images(self):
        """Test that image sources and alt texts match marko."""
        markdown = "![아파트](https://img.example/a.png)\n\n본문\n\n![cap](http://img.example/b.png)"
        assert image_pairs(MarkdownToHtml.convert_text(markdown)) == image_pairs(marko.convert(markdown))
