"""Builds one interactive question card from a question record."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from selfquiz_app.constants.quiz_constants import QUESTION_IMAGE_ALT
from selfquiz_app.core.card_elements import code_block, explanation_region
from selfquiz_app.core.entity_decoder import decode, extract_code_block
from selfquiz_app.core.models import QuestionRecord, RenderedCard
from selfquiz_app.core.typesetting import TypesettingTrigger
from selfquiz_app.core.variant_renderers import RenderContext, renderer_for
from selfquiz_app.utils.dom_helpers import create_element, new_document, set_inner_html

logger = logging.getLogger(__name__)


class CardBuilder:
    """Turns question records into detached ``div.question-card`` subtrees.

    The builder touches no global state: the caller appends the returned
    element wherever it wants it.
    """

    def __init__(
        self,
        trigger: TypesettingTrigger | None = None,
        document: BeautifulSoup | None = None,
    ) -> None:
        self.trigger = trigger or TypesettingTrigger.with_default_engines()
        self.document = document if document is not None else new_document()

    def build(self, record: QuestionRecord) -> RenderedCard:
        document = self.document
        element = create_element(document, "div", class_name="question-card")
        element["id"] = record.id
        card = RenderedCard(card_id=record.id, element=element)

        split = extract_code_block(record.question)
        header = create_element(document, "h4")
        set_inner_html(header, f"{record.id}. {decode(split.before.strip())}")
        element.append(header)

        trailing = split.after.strip()
        if split.has_code and trailing:
            prose = create_element(document, "div", class_name="question-trailing")
            set_inner_html(prose, decode(trailing))
            element.append(prose)

        if record.image:
            image = create_element(document, "img", class_name="question-image")
            image["src"] = record.image
            image["alt"] = QUESTION_IMAGE_ALT
            element.append(image)

        if split.has_code:
            element.append(code_block(document, split.code))

        renderer = renderer_for(record.kind)
        if renderer is None:
            logger.warning("Question %s has unknown type %r; rendering without a body", record.id, record.type)
        else:
            renderer.render(
                RenderContext(document=document, record=record, card=card, trigger=self.trigger)
            )

        element.append(explanation_region(document, ["explanation"], source=record.source))
        return card
