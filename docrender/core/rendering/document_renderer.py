"""
Document Renderer
=================

Walks a compiled content tree and renders every node through the element
resolver, one node at a time, children before parents.
"""

from typing import Any, List, Mapping, Optional, Union

from docrender.config.logging import get_logger
from docrender.core.scope.registry import Scope, enter_scope
from docrender.core.rendering.element_resolver import ElementResolver, get_resolver
from docrender.core.rendering.props import CHILDREN, PARENT_NAME, merge_props
from docrender.models.schemas import ContentDocument, ContentNode

logger = get_logger(__name__)


class DocumentRenderer:
    """Renders content node trees with explicit scopes."""

    def __init__(self, resolver: Optional[ElementResolver] = None) -> None:
        self.resolver = resolver or get_resolver()
        self.logger: Any = logger.bind(component="document_renderer")  # structlog.BoundLoggerBase

    def render_node(
        self,
        node: Union[ContentNode, str],
        scope: Optional[Scope] = None,
        parent_name: Optional[str] = None,
    ) -> Any:
        """
        Render a node and its subtree.

        Args:
            node: Content node or text
            scope: Scope active for this node
            parent_name: Tag of the enclosing node

        Returns:
            Rendered output of the node
        """
        if isinstance(node, str):
            return node

        if node.overrides:
            scope = enter_scope(node.overrides, scope)

        children: List[Any] = [
            self.render_node(child, scope, parent_name=node.tag) for child in node.children
        ]

        location = {PARENT_NAME: parent_name} if parent_name is not None else None
        # A children payload in the props survives when the node has no child nodes
        rendered_children = {CHILDREN: children} if children else None
        props = merge_props(location, node.props, rendered_children)

        selector = node.component if node.component is not None else node.tag
        return self.resolver.render(selector, props, scope)

    def render_document(
        self,
        document: ContentDocument,
        overrides: Optional[Mapping[str, Any]] = None,
        scope: Optional[Scope] = None,
        **layout_props: Any,
    ) -> Any:
        """
        Render a whole document inside its own scope.

        The top-level nodes become the children of the ``wrapper`` tag, which
        also receives the table of contents, metadata and any layout props.

        Args:
            document: Compiled document
            overrides: Document-level renderer overrides
            scope: Enclosing scope
            **layout_props: Extra props for the wrapper

        Returns:
            Rendered output of the wrapper
        """
        self.logger.info("Rendering document", title=document.title, nodes=len(document.nodes))

        document_scope = enter_scope(overrides or {}, scope)
        body = [self.render_node(node, document_scope) for node in document.nodes]

        props = merge_props(
            {"toc": document.toc, "metadata": document.metadata},
            layout_props,
            {CHILDREN: body},
        )
        return self.resolver.render("wrapper", props, document_scope)


def render_document(
    document: ContentDocument,
    overrides: Optional[Mapping[str, Any]] = None,
    **layout_props: Any,
) -> Any:
    """
    Render a document with the shared resolver.

    Args:
        document: Compiled document
        overrides: Document-level renderer overrides
        **layout_props: Extra props for the wrapper

    Returns:
        Rendered output
    """
    return DocumentRenderer().render_document(document, overrides, **layout_props)
