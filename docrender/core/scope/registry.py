"""
Scope Registry
==============

Immutable, nesting-aware views of tag-to-renderer overrides.

Each call to ``enter_scope`` composes a new ``Scope`` whose effective map is
the parent's map with the overrides laid on top key by key. Scopes are never
mutated after construction, so a nested scope can be dropped at any time and
sibling sub-trees never see each other's overrides.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Optional, Union

from docrender.config.logging import get_logger
from docrender.models.schemas import Renderer, as_renderer

logger = get_logger(__name__)

RendererMap = Mapping[str, Any]
# Functional form: receives the parent's effective map, returns the complete new map
OverrideFactory = Callable[[Mapping[str, Renderer]], RendererMap]


class Scope(Mapping):
    """Read-only mapping of tag name to renderer for one rendering context."""

    def __init__(
        self,
        renderers: Optional[RendererMap] = None,
        parent: Optional["Scope"] = None,
    ) -> None:
        composed: Dict[str, Renderer] = {
            tag: as_renderer(renderer) for tag, renderer in (renderers or {}).items()
        }
        self._renderers = MappingProxyType(composed)
        self._parent = parent
        self._depth = parent.depth + 1 if parent is not None else 0

    @property
    def parent(self) -> Optional["Scope"]:
        return self._parent

    @property
    def depth(self) -> int:
        return self._depth

    def __getitem__(self, tag: str) -> Renderer:
        return self._renderers[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._renderers)

    def __len__(self) -> int:
        return len(self._renderers)

    def __repr__(self) -> str:
        return f"Scope(depth={self._depth}, tags={sorted(self._renderers)})"


ROOT_SCOPE = Scope()


def enter_scope(
    overrides: Union[RendererMap, OverrideFactory, None],
    parent: Optional[Scope] = None,
) -> Scope:
    """
    Compose a nested scope.

    Args:
        overrides: Tag-to-renderer overrides, or a callable receiving the
            parent's effective map and returning the full map for the new scope
        parent: Enclosing scope, None for a top-level scope

    Returns:
        New scope; the parent is left untouched
    """
    base: Mapping[str, Renderer] = parent if parent is not None else ROOT_SCOPE

    if callable(overrides) and not isinstance(overrides, Mapping):
        merged = dict(overrides(base))
    else:
        merged = dict(base)
        merged.update(overrides or {})

    scope = Scope(merged, parent=parent)
    logger.debug("scope_entered", depth=scope.depth, tags=len(scope))
    return scope


def resolve(scope: Optional[Scope], tag: str) -> Optional[Renderer]:
    """Return the innermost renderer registered for a tag, or None."""
    if scope is None:
        return None
    return scope.get(tag)
