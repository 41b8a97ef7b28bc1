"""
Core Business Logic
==================

Core rendering logic for compiled documentation pages.

Modules:
- scope: Immutable nested tag-to-renderer override scopes
- rendering: Element resolution, document traversal and HTML generation
"""
