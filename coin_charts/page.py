"""
Modelo de la página del lado del servidor.

La página expone un contenedor de gráficos (``chartSection``) cuyos hijos son
un loader, un párrafo de error o un canvas por moneda. El navegador pide el
fragmento HTML del contenedor y dibuja cada canvas con Chart.js.
"""

import json
from dataclasses import dataclass, field
from html import escape
from typing import Any, Dict, Iterable, List, Optional

CHART_SECTION_ID = "chartSection"
ERROR_TEXT = "Oh No! Something went wrong."


@dataclass
class Element:
    tag: str
    id: Optional[str] = None
    css_class: Optional[str] = None
    text: str = ""
    chart: Optional[Dict[str, Any]] = None
    children: List["Element"] = field(default_factory=list)

    def append_child(self, child: "Element") -> None:
        self.children.append(child)

    def replace_children(self, *children: "Element") -> None:
        # Equivale a asignar innerHTML: se descarta todo lo anterior
        self.children = list(children)

    def clear(self) -> None:
        self.children = []

    def find(self, element_id: str) -> Optional["Element"]:
        if self.id == element_id:
            return self
        for child in self.children:
            found = child.find(element_id)
            if found is not None:
                return found
        return None

    def to_html(self) -> str:
        attrs = ""
        if self.id is not None:
            attrs += f' id="{escape(self.id)}"'
        if self.css_class is not None:
            attrs += f' class="{escape(self.css_class)}"'
        if self.chart is not None:
            attrs += f' data-chart="{escape(json.dumps(self.chart))}"'
        inner = escape(self.text) + render_children(self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def render_children(children: Iterable[Element]) -> str:
    return "".join(child.to_html() for child in children)


def loader() -> Element:
    return Element("div", css_class="loader")


def error_message() -> Element:
    return Element("p", text=ERROR_TEXT)


def canvas(element_id: str) -> Element:
    return Element("canvas", id=element_id)


class Page:
    """Raíz de la página; el contenedor de gráficos existe desde el inicio."""

    def __init__(self, container_id: str = CHART_SECTION_ID):
        self.body = Element("body")
        self.body.append_child(Element("section", id=container_id))

    def get_element_by_id(self, element_id: str) -> Element:
        found = self.body.find(element_id)
        if found is None:
            raise LookupError(f"No element with id {element_id!r}")
        return found

    def canvases(self, container_id: str = CHART_SECTION_ID) -> List[Element]:
        return [c for c in self.get_element_by_id(container_id).children if c.tag == "canvas"]
