"""Tests for the best-effort typesetting trigger."""

import logging

from selfquiz_app.core.typesetting import (
    HIGHLIGHT_ATTRIBUTE,
    TYPESET_ATTRIBUTE,
    TypesettingTrigger,
)
from selfquiz_app.utils.dom_helpers import new_document, set_inner_html


class ExplodingEngine:
    name = "exploding"

    def process(self, nodes):
        raise RuntimeError("engine crashed")


def make_container(markup):
    document = new_document()
    container = document.new_tag("div")
    set_inner_html(container, markup)
    return container


class TestTypesettingTrigger:
    def test_default_engines_mark_nodes(self):
        container = make_container("<p>$x$</p><pre><code>a</code></pre><pre><code>b</code></pre>")
        TypesettingTrigger.with_default_engines().run_batch(container)
        codes = container.select("pre code")
        assert [code[HIGHLIGHT_ATTRIBUTE] for code in codes] == ["pending", "pending"]
        assert container[TYPESET_ATTRIBUTE] == "pending"

    def test_batch_hands_code_nodes_to_highlighter(self, trigger, highlighter, math_engine):
        container = make_container("<pre><code>x</code></pre>")
        trigger.run_batch(container)
        assert highlighter.batches == [container.select("pre code")]
        assert math_engine.batches == [[container]]

    def test_engine_failure_is_logged_not_raised(self, caplog):
        trigger = TypesettingTrigger(highlighter=ExplodingEngine(), math_engine=ExplodingEngine())
        container = make_container("<pre><code>x</code></pre>")
        with caplog.at_level(logging.ERROR, logger="selfquiz_app.core.typesetting"):
            trigger.run_batch(container)
            trigger.typeset_nodes([container])
        assert caplog.text.count("exploding failed") == 3

    def test_missing_math_engine_warns(self, caplog):
        trigger = TypesettingTrigger(highlighter=None, math_engine=None)
        with caplog.at_level(logging.WARNING, logger="selfquiz_app.core.typesetting"):
            trigger.typeset_nodes([make_container("<p>$y$</p>")])
        assert "Math typesetting engine not available" in caplog.text

    def test_empty_node_list_is_skipped(self, trigger, math_engine):
        trigger.typeset_nodes([])
        assert math_engine.batches == []
