"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Renderer settings and environment configuration
- logging: Structured logging configuration
"""
