"""Tests for alternating Markdown/HTML conversions."""

import pytest

from blogmark import HtmlToMarkdown, MarkdownToHtml

SCENARIO = "# Title\n\nHello **world**, see [here](https://x.com).\n\n![cap](https://img/a.png)"

SUBSET_DOCUMENTS = [
    SCENARIO,
    "## 소제목\n본문 바로 아래 줄\n이어지는 줄",
    "__굵게__ 그리고 _기울임_ 그리고 **또 굵게**",
    "[링크만 있는 줄](https://example.com/path?a=1&b=2)",
    "![캡션](http://img.example/a.png) 사진 설명\n\n마지막 단락",
    "첫 단락\n\n\n\n\n둘째 단락\n\n---\n\n### 끝",
    "**bold *and* italic** with [a *styled* link](https://x.com)",
]


def cycle(markdown, hint=None):
    return HtmlToMarkdown.convert_text(MarkdownToHtml.convert_text(markdown, hint))


class TestScenario:
    """The heading/bold/link/image scenario end to end."""

    def test_markdown_to_html(self):
        """Test that every element of the scenario is rendered."""
        html = MarkdownToHtml.convert_text(SCENARIO)

        assert "<h1>Title</h1>" in html
        assert '<p>Hello <strong>world</strong>, see <a href="https://x.com">here</a>.</p>' in html
        assert '<img src="https://img/a.png" alt="cap"' in html

    def test_back_to_markdown(self):
        """Test that converting back restores all four elements."""
        markdown = cycle(SCENARIO)

        assert "# Title" in markdown
        assert "**world**" in markdown
        assert "[here](https://x.com)" in markdown
        assert "![cap](https://img/a.png)" in markdown

    def test_scenario_is_already_a_fixed_point(self):
        """Test that normalized input survives unchanged."""
        assert cycle(SCENARIO) == SCENARIO


class TestFixedPoint:
    """Tests for convergence within two round trips."""

    @pytest.mark.parametrize("markdown", SUBSET_DOCUMENTS)
    def test_two_round_trips_agree(self, markdown: str):
        """Test that the second round trip changes nothing."""
        first = cycle(markdown, hint="부동산 시장")
        second = cycle(first, hint="부동산 시장")
        assert first == second

    @pytest.mark.parametrize("markdown", SUBSET_DOCUMENTS)
    def test_html_is_stable_after_first_round_trip(self, markdown: str):
        """Test Markdown->HTML->Markdown->HTML equals Markdown->HTML at the fixed point."""
        stable = cycle(markdown)
        html = MarkdownToHtml.convert_text(stable)
        assert MarkdownToHtml.convert_text(HtmlToMarkdown.convert_text(html)) == html

    def test_soft_break_becomes_paragraph_boundary(self):
        """Test that lines of one paragraph come back as separate paragraphs."""
        assert cycle("첫 줄\n둘째 줄") == "첫 줄\n\n둘째 줄"

    def test_underscore_delimiters_normalize_to_asterisks(self):
        """Test that alternate delimiters converge on one spelling."""
        assert cycle("__굵게__ _기울임_") == "**굵게** *기울임*"


class TestScriptPreservation:
    """Tests for non-Latin text."""

    KOREAN = (
        "# 저출산 문제, 해법은?\n\n"
        "통계청에 따르면 합계출산율은 0.72명으로 **역대 최저**를 기록했습니다. "
        "전문가들은 *주거*와 *일자리* 문제를 함께 봐야 한다고 말합니다 🙂\n\n"
        "자세한 내용은 [통계청 보도자료](https://kostat.go.kr)를 참고하세요."
    )

    def test_korean_survives_both_directions(self):
        """Test that Hangul passes through without corruption."""
        assert cycle(self.KOREAN) == self.KOREAN

    def test_korean_html_keeps_characters(self):
        """Test that Hangul is not entity-encoded in HTML."""
        html = MarkdownToHtml.convert_text(self.KOREAN)
        assert "합계출산율은 0.72명으로 <strong>역대 최저</strong>를" in html
        assert "🙂" in html

    def test_mixed_script_emphasis(self):
        """Test emphasis that starts and ends on Hangul."""
        assert cycle("K-POP *인기*가 **계속**된다") == "K-POP *인기*가 **계속**된다"


class TestLiteralText:
    """Tests for prose that looks like markup."""

    @pytest.mark.parametrize("markdown", [
        "가격 비교: A<B 입니다.\n\n다음 단락",
        "x > 3 && y < 5\n\n<script>는 태그가 아닙니다",
        "Fish & Chips &amp; more",
    ])
    def test_angle_brackets_and_ampersands_survive(self, markdown: str):
        """Test that <, > and & in text are not taken for markup."""
        assert cycle(markdown) == markdown

    def test_literal_characters_are_escaped_in_html(self):
        """Test the entity-escaped HTML form."""
        assert MarkdownToHtml.convert_text("A<B & C>D") == "<p>A&lt;B &amp; C&gt;D</p>"

    def test_bold_italic_from_html(self):
        """Test that nested strong and em come back from Markdown unchanged."""
        html = "<p><strong><em>x</em></strong> and <em>see <strong>this</strong> now</em></p>"
        assert MarkdownToHtml.convert_text(HtmlToMarkdown.convert_text(html)) == html
