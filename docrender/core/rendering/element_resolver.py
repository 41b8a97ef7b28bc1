"""
Element Resolver
================

Single entry point for rendering one content node.

Selects the renderer for a node (direct reference, scoped override, default
table, literal passthrough), strips bookkeeping properties and invokes the
renderer. Renderer failures propagate to the caller untouched.
"""

from typing import Any, Dict, Mapping, Optional, Union

from docrender.config.logging import get_logger
from docrender.config.settings import get_settings
from docrender.core.scope.registry import ROOT_SCOPE, Scope, enter_scope, resolve
from docrender.core.rendering.defaults import DEFAULT_RENDERERS
from docrender.core.rendering.props import (
    COMPONENTS,
    MDX_TYPE,
    ORIGINAL_TYPE,
    PARENT_NAME,
    REF,
    sanitize_props,
)
from docrender.models.schemas import ContentNode, Renderer, as_renderer, is_renderer

logger = get_logger(__name__)

Selector = Union[str, Renderer, Any]


class ElementResolver:
    """Resolves selectors to renderers and invokes them."""

    def __init__(
        self,
        defaults: Optional[Mapping[str, Any]] = None,
        qualified_lookup: Optional[bool] = None,
    ) -> None:
        self.logger: Any = logger.bind(component="element_resolver")  # structlog.BoundLoggerBase
        self.defaults: Dict[str, Renderer] = {
            tag: as_renderer(renderer)
            for tag, renderer in (DEFAULT_RENDERERS if defaults is None else defaults).items()
        }
        # None defers to the current settings on every call
        self._qualified_lookup = qualified_lookup
        self._log_unknown_tags: Optional[bool] = None

    @property
    def qualified_lookup(self) -> bool:
        if self._qualified_lookup is not None:
            return self._qualified_lookup
        return get_settings().qualified_lookup

    @qualified_lookup.setter
    def qualified_lookup(self, value: Optional[bool]) -> None:
        self._qualified_lookup = value

    @property
    def log_unknown_tags(self) -> bool:
        if self._log_unknown_tags is not None:
            return self._log_unknown_tags
        return get_settings().log_unknown_tags

    @log_unknown_tags.setter
    def log_unknown_tags(self, value: Optional[bool]) -> None:
        self._log_unknown_tags = value

    def select(
        self,
        selector: Selector,
        props: Optional[Mapping[str, Any]] = None,
        scope: Optional[Scope] = None,
    ) -> Renderer:
        """
        Pick the renderer for a selector.

        Args:
            selector: Tag name or direct renderer reference
            props: Property bag, may carry bookkeeping keys
            scope: Active scope

        Returns:
            Renderer to invoke; never fails for unknown tags
        """
        if is_renderer(selector):
            return as_renderer(selector)

        props = props or {}
        tag = str(selector)

        components = props.get(COMPONENTS)
        if components:
            scope = enter_scope(components, scope)

        renderer: Optional[Renderer] = None

        parent_name = props.get(PARENT_NAME)
        if parent_name and self.qualified_lookup:
            renderer = resolve(scope, f"{parent_name}.{tag}")

        if renderer is None:
            renderer = resolve(scope, tag)

        if renderer is None:
            renderer = self.defaults.get(tag)

        if renderer is None:
            # Unknown content degrades to a literal primitive instead of aborting
            original = props.get(ORIGINAL_TYPE)
            if not (isinstance(original, str) or is_renderer(original)):
                original = tag
            renderer = as_renderer(original)
            if self.log_unknown_tags:
                self.logger.debug("unknown_tag_passthrough", tag=tag)

        return renderer

    def render(
        self,
        selector: Selector,
        props: Optional[Mapping[str, Any]] = None,
        scope: Optional[Scope] = None,
        ref: Any = None,
    ) -> Any:
        """
        Render one node.

        Args:
            selector: Tag name or direct renderer reference
            props: Property bag including the children payload
            scope: Active scope, defaults to the root scope
            ref: Handle forwarded to the renderer as ``props["ref"]``

        Returns:
            Whatever the selected renderer returns
        """
        props = props or {}
        renderer = self.select(selector, props, scope if scope is not None else ROOT_SCOPE)

        clean_props = sanitize_props(props)
        if ref is not None:
            clean_props[REF] = ref

        return renderer(clean_props)


def create_element(element_type: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> ContentNode:
    """
    Build a content node the way compiled documents do.

    String types, and components that carry an ``mdxType`` prop, record their
    lookup name and original type so they stay overridable. Other components
    become direct renderer references.
    """
    node_props = dict(props or {})

    if isinstance(element_type, str) or node_props.get(MDX_TYPE):
        if isinstance(element_type, str):
            node_props[MDX_TYPE] = element_type
        node_props[ORIGINAL_TYPE] = element_type
        return ContentNode(tag=node_props[MDX_TYPE], props=node_props, children=list(children))

    name = getattr(element_type, "__name__", type(element_type).__name__)
    return ContentNode(tag=name, component=element_type, props=node_props, children=list(children))


# Shared resolver instance - created on first use
_resolver: Optional[ElementResolver] = None


def get_resolver() -> ElementResolver:
    """Get the shared resolver using the default table."""
    global _resolver
    if _resolver is None:
        _resolver = ElementResolver()
    return _resolver


def render(
    selector: Selector,
    props: Optional[Mapping[str, Any]] = None,
    scope: Optional[Scope] = None,
    ref: Any = None,
) -> Any:
    """Render one node with the shared resolver."""
    return get_resolver().render(selector, props, scope, ref=ref)
