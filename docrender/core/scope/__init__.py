"""
Scope Module
============

Nested renderer override scopes.

Components:
- registry: Scope construction and tag resolution
"""

from .registry import Scope, ROOT_SCOPE, enter_scope, resolve

__all__ = ["Scope", "ROOT_SCOPE", "enter_scope", "resolve"]
