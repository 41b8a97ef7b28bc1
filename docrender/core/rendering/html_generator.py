"""
HTML Generator
==============

Optional adapter that serializes rendered trees to HTML and wraps them in a
page template. Sits outside the resolution core.
"""

import re
from typing import Dict, List, Any, Mapping, Optional
from pathlib import Path

import jinja2
from markupsafe import Markup, escape

from docrender.config.logging import get_logger
from docrender.config.settings import get_settings
from docrender.core.rendering.document_renderer import DocumentRenderer
from docrender.core.rendering.props import CHILDREN, REF, RESERVED_PROPS
from docrender.models.schemas import ContentDocument, RenderedElement, RenderOptions

logger = get_logger(__name__)

VOID_ELEMENTS = frozenset({"br", "hr", "img", "input"})

# Tag and attribute names written into markup must match this
NAME_PATTERN = re.compile(r"^[A-Za-z_:][-A-Za-z0-9_.:]*$")

# Property names that differ from their HTML attribute names
ATTRIBUTE_NAMES: Dict[str, str] = {
    "className": "class",
    "htmlFor": "for",
}


class HTMLGenerationError(Exception):
    """Exception raised when HTML generation fails."""

    pass


def to_html(rendered: Any) -> Markup:
    """
    Serialize rendered output to HTML.

    Args:
        rendered: RenderedElement, text, Markup or a list of those

    Returns:
        Escaped HTML markup
    """
    if rendered is None or rendered is False:
        return Markup("")
    if isinstance(rendered, Markup):
        return rendered
    if isinstance(rendered, (list, tuple)):
        return Markup("").join(to_html(item) for item in rendered)
    if isinstance(rendered, RenderedElement):
        return _element_to_html(rendered)
    return escape(str(rendered))


def _element_to_html(element: RenderedElement) -> Markup:
    children_html = to_html(element.children)
    if element.is_fragment:
        return children_html
    if not NAME_PATTERN.match(element.type):
        logger.warning("invalid_tag_name_dropped", tag=element.type)
        return children_html

    attrs = _build_attributes(element.props)
    if element.type in VOID_ELEMENTS:
        return Markup(f"<{element.type}{attrs}>")
    return Markup(f"<{element.type}{attrs}>") + children_html + Markup(f"</{element.type}>")


def _build_attributes(props: Mapping[str, Any]) -> str:
    """Build HTML attributes string."""
    attr_pairs: List[str] = []
    for key, value in props.items():
        if key in RESERVED_PROPS or key in (CHILDREN, REF):
            continue
        if value is None or value is False:
            continue
        if not isinstance(value, (str, int, float, bool)):
            continue
        if not NAME_PATTERN.match(key):
            logger.warning("invalid_attribute_name_dropped", attribute=key)
            continue

        name = ATTRIBUTE_NAMES.get(key, key)
        if value is True:
            attr_pairs.append(name)
        else:
            attr_pairs.append(f'{name}="{escape(str(value))}"')

    return " " + " ".join(attr_pairs) if attr_pairs else ""


class Jinja2HTMLGenerator:
    """Jinja2-based page generator."""

    def __init__(self, renderer: Optional[DocumentRenderer] = None) -> None:
        self.renderer = renderer or DocumentRenderer()
        self.logger: Any = logger.bind(generator="jinja2")  # structlog.BoundLoggerBase
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(Path(__file__).parent / "templates")),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
            enable_async=True,
        )

    async def generate(
        self,
        document: ContentDocument,
        options: RenderOptions,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Generate a full HTML page using the base template.

        Raises:
            HTMLGenerationError: If the page template fails
        """
        # Renderer failures propagate unchanged
        body = to_html(self.renderer.render_document(document, overrides))

        try:
            template = self.env.get_template("base.html")
            html = await template.render_async(
                title=options.title or document.title or "",
                lang=options.lang or get_settings().default_lang,
                include_doctype=options.include_doctype,
                metadata=document.metadata,
                body=body,
            )
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("HTML generation failed", error=error_msg)
            raise HTMLGenerationError(error_msg) from e

        self.logger.info("HTML generation completed", title=document.title, html_length=len(html))
        return html


async def generate_html(
    document: ContentDocument,
    options: RenderOptions,
    overrides: Optional[Mapping[str, Any]] = None,
) -> str:
    """Generate an HTML page from a compiled document."""
    return await Jinja2HTMLGenerator().generate(document, options, overrides)
