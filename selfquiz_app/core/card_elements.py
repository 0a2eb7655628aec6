"""Element factories shared by the card builder and the variant renderers."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from selfquiz_app.constants.quiz_constants import (
    ANSWER_LABEL,
    CODE_LANGUAGE_CLASS,
    EXPLANATION_LABEL,
    SOURCE_LABEL,
)
from selfquiz_app.utils.dom_helpers import create_element, set_style


def code_block(document: BeautifulSoup, code: str, language_class: str = CODE_LANGUAGE_CLASS) -> Tag:
    """``<pre><code class=language-...>`` holding ``code`` as plain text."""
    pre = create_element(document, "pre")
    pre.append(create_element(document, "code", class_name=language_class, text=code))
    return pre


def labelled_paragraph(document: BeautifulSoup, label: str, class_name: str | None = None) -> Tag:
    paragraph = create_element(document, "p", class_name=class_name)
    paragraph.append(create_element(document, "strong", text=label))
    return paragraph


def explanation_region(
    document: BeautifulSoup,
    class_names: list[str],
    source: str | None = None,
    include_source: bool = True,
) -> Tag:
    """Hidden panel with answer and explanation slots filled in on first selection."""
    region = create_element(document, "div", class_name=class_names)
    set_style(region, {"display": "none"})

    answer = labelled_paragraph(document, ANSWER_LABEL)
    answer.append(create_element(document, "span", class_name="answer-text"))
    region.append(answer)

    explanation = labelled_paragraph(document, EXPLANATION_LABEL)
    explanation.append(create_element(document, "span", class_name="explanation-text"))
    region.append(explanation)

    if include_source:
        citation = labelled_paragraph(document, SOURCE_LABEL, class_name="source")
        citation.append(f" {source if source is not None else ''}")
        region.append(citation)
    return region
