"""Small helpers for building and mutating BeautifulSoup trees like a DOM."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

_PARSER = "html.parser"


def new_document() -> BeautifulSoup:
    """Return an empty document used as an element factory."""
    return BeautifulSoup("", _PARSER)


def create_element(
    document: BeautifulSoup,
    tag_name: str,
    class_name: str | list[str] | None = None,
    text: str | None = None,
) -> Tag:
    """Create a detached element with optional classes and text content."""
    element = document.new_tag(tag_name)
    if class_name:
        names = class_name if isinstance(class_name, list) else [class_name]
        for name in names:
            add_class(element, name)
    if text:
        element.string = text
    return element


def clear_element(element: Tag) -> None:
    element.clear()


def set_text(element: Tag, text: str) -> None:
    """Replace the children of ``element`` with a single text node."""
    element.clear()
    if text:
        element.string = text


def set_inner_html(element: Tag, markup: str | None) -> None:
    """Replace the children of ``element`` with parsed ``markup``.

    The markup is trusted author content and is inserted as live elements.
    """
    element.clear()
    append_html(element, markup)


def append_html(element: Tag, markup: str | None) -> None:
    if not markup:
        return
    fragment = BeautifulSoup(markup, _PARSER)
    for child in list(fragment.contents):
        element.append(child.extract())


def class_list(element: Tag) -> list[str]:
    value = element.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def add_class(element: Tag, name: str) -> None:
    classes = class_list(element)
    if name not in classes:
        classes.append(name)
    element["class"] = classes


def remove_class(element: Tag, name: str) -> None:
    classes = [value for value in class_list(element) if value != name]
    if classes:
        element["class"] = classes
    elif element.has_attr("class"):
        del element["class"]


def has_class(element: Tag, name: str) -> bool:
    return name in class_list(element)


def get_style(element: Tag) -> dict[str, str]:
    """Parse the inline ``style`` attribute into an ordered mapping."""
    declarations: dict[str, str] = {}
    for chunk in str(element.get("style", "")).split(";"):
        if ":" not in chunk:
            continue
        name, value = chunk.split(":", 1)
        declarations[name.strip().lower()] = value.strip()
    return declarations


def set_style(element: Tag, declarations: dict[str, str]) -> None:
    """Merge ``declarations`` into the inline style of ``element``."""
    merged = get_style(element)
    merged.update(declarations)
    element["style"] = "; ".join(f"{name}: {value}" for name, value in merged.items())


def is_hidden(element: Tag) -> bool:
    return get_style(element).get("display") == "none"
