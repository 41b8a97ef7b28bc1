"""
Rendering Module
===============

Element resolution, document traversal and HTML generation.

Components:
- defaults: Built-in renderer table for standard tags
- props: Reserved property keys, merging and sanitization
- element_resolver: Per-node renderer selection and invocation
- document_renderer: Content tree traversal
- html_generator: HTML serialization and page assembly
"""
