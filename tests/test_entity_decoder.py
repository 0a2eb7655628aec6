"""Tests for entity decoding and fenced code block extraction."""

import pytest

from selfquiz_app.core.entity_decoder import decode, extract_code_block


class TestDecode:
    """Character references are decoded, markup is left alone."""

    def test_named_and_numeric_entities(self):
        assert decode("&lt;b&gt; &amp; &#65;&#x42; &quot;x&quot;") == '<b> & AB "x"'

    def test_non_breaking_space(self):
        assert decode("a&nbsp;b") == "a\u00a0b"

    def test_tags_stay_literal(self):
        assert decode("<b>ok</b>") == "<b>ok</b>"

    def test_none_and_empty(self):
        assert decode(None) == ""
        assert decode("") == ""

    @pytest.mark.parametrize("text", ["int x = 1;", "纯文本题干", "a < b && c > d"])
    def test_idempotent_on_plain_text(self, text):
        assert decode(decode(text)) == decode(text)


class TestExtractCodeBlock:
    """Only the first <pre><code> block of a field is recognised."""

    def test_block_found(self):
        split = extract_code_block("看程序：<PRE> <code class='cpp'>a &lt; b</code>\n</pre> 输出？")
        assert split.before == "看程序："
        assert split.code == "a < b"
        assert split.after == " 输出？"
        assert split.has_code

    def test_no_block(self):
        split = extract_code_block("  plain question  ")
        assert split.code is None
        assert split.before == "plain question"
        assert split.after == "plain question"
        assert not split.has_code

    def test_none_text(self):
        split = extract_code_block(None)
        assert split.before == split.after == ""
        assert split.code is None

    def test_second_block_left_in_after(self):
        text = "x<pre><code>first</code></pre>y<pre><code>second</code></pre>"
        split = extract_code_block(text)
        assert split.code == "first"
        assert split.after == "y<pre><code>second</code></pre>"

    def test_reextracting_after_without_second_block(self):
        split = extract_code_block("lead <pre><code>int x;</code></pre>  trailing text ")
        again = extract_code_block(split.after)
        assert again.code is None
        assert again.before == again.after == "trailing text"

    def test_multiline_code_is_kept(self):
        split = extract_code_block("<pre><code>for (;;) {\n  x++;\n}</code></pre>")
        assert split.before == ""
        assert split.code == "for (;;) {\n  x++;\n}"
