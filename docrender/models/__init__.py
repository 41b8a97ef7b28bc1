"""
Data Models
===========

Pydantic data models for renderers, content trees and rendered output.

Models:
- schemas: Renderer variants, rendered elements, content nodes and documents
"""
