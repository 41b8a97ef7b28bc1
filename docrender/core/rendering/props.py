"""
Property Rules
==============

Reserved bookkeeping keys, pure property merging and sanitization.
"""

from typing import Any, Dict, Mapping, Optional

from docrender.models.schemas import normalize_children

# Scope lookup name of a node
MDX_TYPE = "mdxType"
# Element type the node was created from, used for passthrough
ORIGINAL_TYPE = "originalType"
# Tag of the enclosing node, used for qualified lookup
PARENT_NAME = "parentName"
# Inline overrides merged into the scope for one lookup
COMPONENTS = "components"

RESERVED_PROPS = frozenset({MDX_TYPE, ORIGINAL_TYPE, PARENT_NAME, COMPONENTS})

CHILDREN = "children"
REF = "ref"


def merge_props(*sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge property bags left to right into a new dict; later sources win."""
    merged: Dict[str, Any] = {}
    for source in sources:
        if source:
            merged.update(source)
    return merged


def sanitize_props(props: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of the bag without reserved bookkeeping keys."""
    return {key: value for key, value in props.items() if key not in RESERVED_PROPS}


__all__ = [
    "MDX_TYPE",
    "ORIGINAL_TYPE",
    "PARENT_NAME",
    "COMPONENTS",
    "RESERVED_PROPS",
    "CHILDREN",
    "REF",
    "merge_props",
    "sanitize_props",
    "normalize_children",
]
