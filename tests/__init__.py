"""
Test Suite
==========

Test suite matching the docrender/ package structure.

Test Categories:
- unit: Unit tests for scopes, resolution, traversal and HTML generation
"""
