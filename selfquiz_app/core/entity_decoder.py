"""Entity decoding and fenced code block extraction for authored question text.

Question data stores source code as escaped markup inside a
``<pre><code>...</code></pre>`` block. Only the first block of a field is
recognised; anything after it, including further blocks, is returned
untouched in ``after`` and rendered as trailing prose.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

_CODE_BLOCK_PATTERN = re.compile(
    r"<pre>\s*<code[^>]*>(?P<code>[\s\S]*?)</code>\s*</pre>",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class CodeBlockSplit:
    """Text around the first fenced code block of a field."""

    before: str
    code: str | None
    after: str

    @property
    def has_code(self) -> bool:
        return self.code is not None


def decode(text: str | None) -> str:
    """Turn HTML character references into literal characters.

    Uses the HTML5 character reference rules, the same result as writing the
    text into a ``<textarea>`` and reading its value back: tags are kept as
    literal text and nothing is rendered or executed.
    """
    if not text:
        return ""
    return html.unescape(text)


def extract_code_block(text: str | None) -> CodeBlockSplit:
    """Split ``text`` around its first ``<pre><code>`` block."""
    text = text or ""
    match = _CODE_BLOCK_PATTERN.search(text)
    if match is None:
        stripped = text.strip()
        return CodeBlockSplit(before=stripped, code=None, after=stripped)
    return CodeBlockSplit(
        before=text[: match.start()],
        code=decode(match.group("code")),
        after=text[match.end():],
    )
