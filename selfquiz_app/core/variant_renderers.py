"""Per-question-type body renderers.

Each renderer appends the variant body of a card (options list, reading
sub-questions or programming panels) and binds an :class:`OptionGroup` to
every options list it creates. Records are not validated: a field the
variant needs but the record lacks simply produces no element.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup, Tag

from selfquiz_app.constants.quiz_constants import (
    INPUT_FORMAT_LABEL,
    OUTPUT_FORMAT_LABEL,
    SAMPLE_INPUT_LABEL,
    SAMPLE_LANGUAGE_CLASS,
    SAMPLE_OUTPUT_LABEL,
    TRUE_FALSE_OPTIONS,
)
from selfquiz_app.core.card_elements import code_block, explanation_region, labelled_paragraph
from selfquiz_app.core.entity_decoder import decode, extract_code_block
from selfquiz_app.core.grading import GradingMode, OptionGroup
from selfquiz_app.core.models import QuestionRecord, QuestionType, RenderedCard
from selfquiz_app.core.typesetting import TypesettingTrigger
from selfquiz_app.utils.dom_helpers import append_html, create_element, set_inner_html, set_text


@dataclass(slots=True)
class RenderContext:
    """Everything a renderer needs to populate one card."""

    document: BeautifulSoup
    record: QuestionRecord
    card: RenderedCard
    trigger: TypesettingTrigger

    @property
    def element(self) -> Tag:
        return self.card.element


def selectable_key(option_text: str) -> str:
    """First non-space character of an option, its identity for grading."""
    return option_text.strip()[:1]


class VariantRenderer:
    """Base class holding the options-list routine shared by the variants."""

    kind: QuestionType

    def render(self, context: RenderContext) -> None:
        raise NotImplementedError

    def build_choice_list(
        self,
        context: RenderContext,
        options: Sequence[str],
        correct: Any,
        explanation: str | None,
        sub_id: int | None = None,
    ) -> Tag:
        ul = create_element(context.document, "ul", class_name="options")
        for option_text in options:
            li = create_element(context.document, "li")
            split = extract_code_block(option_text)
            if split.has_code:
                set_text(li, split.before)
                li.append(code_block(context.document, split.code))
            else:
                set_inner_html(li, option_text)
            li["data-option"] = selectable_key(option_text)
            if sub_id is not None:
                li["data-subid"] = str(sub_id)
            ul.append(li)
        self._bind(context, ul, GradingMode.SINGLE, correct, explanation, sub_id)
        return ul

    def build_true_false_list(
        self,
        context: RenderContext,
        correct: Any,
        explanation: str | None,
        sub_id: int | None = None,
    ) -> Tag:
        ul = create_element(context.document, "ul", class_name="options")
        for label, key in TRUE_FALSE_OPTIONS:
            li = create_element(context.document, "li", text=label)
            li["data-option"] = key
            if sub_id is not None:
                li["data-subid"] = str(sub_id)
            ul.append(li)
        self._bind(context, ul, GradingMode.TRUE_FALSE, correct, explanation, sub_id)
        return ul

    @staticmethod
    def _bind(
        context: RenderContext,
        ul: Tag,
        mode: GradingMode,
        correct: Any,
        explanation: str | None,
        sub_id: int | None,
    ) -> None:
        ul["data-grading"] = "truefalse" if mode is GradingMode.TRUE_FALSE else "single"
        context.card.option_groups.append(
            OptionGroup(
                card_id=context.card.card_id,
                card_element=context.element,
                list_element=ul,
                mode=mode,
                correct=correct,
                explanation=explanation,
                source=context.record.source,
                trigger=context.trigger,
                sub_id=sub_id,
            )
        )


class SingleChoiceRenderer(VariantRenderer):
    kind = QuestionType.SINGLE

    def render(self, context: RenderContext) -> None:
        record = context.record
        if record.options is None:
            return
        context.element.append(
            self.build_choice_list(context, record.options, record.correct, record.explanation)
        )


class TrueFalseRenderer(VariantRenderer):
    kind = QuestionType.TRUE_FALSE

    def render(self, context: RenderContext) -> None:
        record = context.record
        context.element.append(
            self.build_true_false_list(context, record.correct, record.explanation)
        )


class ReadingRenderer(VariantRenderer):
    """Program-reading question: one listing followed by graded sub-questions."""

    kind = QuestionType.READING

    def render(self, context: RenderContext) -> None:
        record = context.record
        if record.code:
            context.element.append(code_block(context.document, record.code))

        for index, sub in enumerate(record.sub_questions):
            section = create_element(context.document, "div", class_name="sub-question")
            header = create_element(context.document, "h5")
            set_inner_html(header, f"{record.id}.{index + 1} {sub.question}")
            section.append(header)

            if sub.kind is QuestionType.TRUE_FALSE:
                section.append(
                    self.build_true_false_list(context, sub.correct, sub.explanation, sub_id=index)
                )
            elif sub.options is not None:
                section.append(
                    self.build_choice_list(
                        context, sub.options, sub.correct, sub.explanation, sub_id=index
                    )
                )

            section.append(
                explanation_region(
                    context.document,
                    ["sub-explanation", f"sub-{index}"],
                    include_source=False,
                )
            )
            context.element.append(section)


class ProgrammingRenderer(VariantRenderer):
    """Programming prompt with I/O panels and an optional choice quiz on top."""

    kind = QuestionType.PROGRAMMING

    def render(self, context: RenderContext) -> None:
        record = context.record
        document = context.document

        for label, text in ((INPUT_FORMAT_LABEL, record.input), (OUTPUT_FORMAT_LABEL, record.output)):
            panel = create_element(document, "div", class_name="input-output")
            paragraph = labelled_paragraph(document, label)
            append_html(paragraph, text)
            panel.append(paragraph)
            context.element.append(panel)

        for label, text in (
            (SAMPLE_INPUT_LABEL, record.sample_input),
            (SAMPLE_OUTPUT_LABEL, record.sample_output),
        ):
            panel = create_element(document, "div", class_name="input-output")
            panel.append(labelled_paragraph(document, label))
            panel.append(code_block(document, decode(text), SAMPLE_LANGUAGE_CLASS))
            context.element.append(panel)

        if record.options is not None:
            context.element.append(
                self.build_choice_list(context, record.options, record.correct, record.explanation)
            )


VARIANT_RENDERERS: dict[QuestionType, VariantRenderer] = {
    renderer.kind: renderer
    for renderer in (
        SingleChoiceRenderer(),
        TrueFalseRenderer(),
        ReadingRenderer(),
        ProgrammingRenderer(),
    )
}


def renderer_for(kind: QuestionType | None) -> VariantRenderer | None:
    if kind is None:
        return None
    return VARIANT_RENDERERS.get(kind)
