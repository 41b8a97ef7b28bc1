"""
Pydantic Models and Schemas
===========================

Core data models for renderers, content node trees and rendered output.

A renderer is one of two variants:

- ``BuiltinPrimitive``: a structural tag understood natively by the output
  target (``"h1"``, ``"pre"``, ...). Invoking it builds a ``RenderedElement``.
- ``CustomComponent``: a callable taking a property bag and returning any
  rendered output.
"""

from typing import Optional, List, Dict, Any, Union, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field

# Primitive name that renders its children without an enclosing element
FRAGMENT = "#fragment"


# Renderer Variants
class BuiltinPrimitive(BaseModel):
    """Output primitive identified by its tag name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["builtin"] = "builtin"
    name: str = Field(..., description="Primitive tag name")

    def __call__(self, props: Dict[str, Any]) -> "RenderedElement":
        element_props = {key: value for key, value in props.items() if key != "children"}
        return RenderedElement(
            type=self.name,
            props=element_props,
            children=normalize_children(props.get("children")),
        )


class CustomComponent(BaseModel):
    """User supplied renderer callable."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["component"] = "component"
    func: Callable[[Dict[str, Any]], Any]

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", type(self.func).__name__)

    def __call__(self, props: Dict[str, Any]) -> Any:
        return self.func(props)


Renderer = Union[BuiltinPrimitive, CustomComponent]


def is_renderer(value: Any) -> bool:
    """Check whether a value is a direct renderer reference rather than a tag."""
    return isinstance(value, (BuiltinPrimitive, CustomComponent)) or (
        callable(value) and not isinstance(value, str)
    )


def as_renderer(value: Any) -> Renderer:
    """
    Coerce a value into a renderer variant.

    Args:
        value: Renderer, primitive tag name or callable

    Returns:
        Renderer instance

    Raises:
        TypeError: If the value cannot act as a renderer
    """
    if isinstance(value, (BuiltinPrimitive, CustomComponent)):
        return value
    if isinstance(value, str):
        return BuiltinPrimitive(name=value)
    if callable(value):
        return CustomComponent(func=value)
    raise TypeError(f"Cannot use {type(value).__name__} as a renderer: {value!r}")


def normalize_children(value: Any) -> List[Any]:
    """Turn a children payload into a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


# Rendered Output
class RenderedElement(BaseModel):
    """Output of a built-in primitive."""

    type: str = Field(..., description="Primitive tag name")
    props: Dict[str, Any] = Field(default_factory=dict)
    children: List[Any] = Field(default_factory=list)

    @property
    def is_fragment(self) -> bool:
        return self.type == FRAGMENT


# Content Models
class ContentNode(BaseModel):
    """Node of a compiled document tree."""

    tag: str = Field(..., description="Node type, e.g. 'h1', 'pre', 'inlineCode'")
    props: Dict[str, Any] = Field(default_factory=dict)
    children: List[Union["ContentNode", str]] = Field(default_factory=list)

    # Direct renderer reference, bypasses scope lookup
    component: Optional[Callable[..., Any]] = None
    # Local overrides for this node and its subtree
    overrides: Optional[Dict[str, Any]] = None


ContentNode.model_rebuild()


class TocEntry(BaseModel):
    """Table of contents entry."""

    value: str
    id: str
    children: List["TocEntry"] = Field(default_factory=list)


TocEntry.model_rebuild()


class ContentDocument(BaseModel):
    """Compiled document ready for rendering."""

    title: Optional[str] = Field(None, description="Document title")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Front matter and page metadata")
    toc: List[TocEntry] = Field(default_factory=list, description="Table of contents")
    nodes: List[Union[ContentNode, str]] = Field(default_factory=list, description="Top-level nodes")


class RenderOptions(BaseModel):
    """Page assembly options."""

    title: Optional[str] = Field(None, description="Overrides the document title")
    lang: Optional[str] = Field(None, description="Page language, defaults to settings")
    include_doctype: bool = Field(True, description="Emit <!DOCTYPE html>")
