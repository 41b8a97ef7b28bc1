"""
Document Renderer
=================

Component-override resolution for rendering compiled documentation pages.

Documents arrive as trees of tagged content nodes. This package decides which
renderer handles each tag, lets callers override the defaults selectively and
composes those overrides through nested, immutable scopes.

This package provides:
- Scope registry with per-key overlay semantics
- Element resolver with default table and last-resort passthrough
- Document tree rendering and HTML page assembly
"""

__version__ = "1.0.0"
