"""
Default Renderer Table
======================

Built-in renderers for every standard tag the document compiler emits.
"""

from types import MappingProxyType
from typing import Dict, Mapping

from docrender.models.schemas import FRAGMENT, BuiltinPrimitive, Renderer

STANDARD_TAGS = (
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "a", "div", "span",
    "ul", "ol", "li",
    "pre", "code",
    "em", "strong", "del", "sup",
    "blockquote", "hr", "br", "img", "input",
    "table", "thead", "tbody", "tr", "th", "td",
)

# Compiler node names that render through a differently named primitive
TAG_ALIASES: Dict[str, str] = {
    "inlineCode": "code",
    "wrapper": FRAGMENT,
    "thematicBreak": "hr",
    "emphasis": "em",
    "delete": "del",
}


def build_default_renderers() -> Mapping[str, Renderer]:
    """Build the read-only default table."""
    table: Dict[str, Renderer] = {tag: BuiltinPrimitive(name=tag) for tag in STANDARD_TAGS}
    for alias, primitive in TAG_ALIASES.items():
        table[alias] = BuiltinPrimitive(name=primitive)
    return MappingProxyType(table)


DEFAULT_RENDERERS = build_default_renderers()
