"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Rendering settings and environment configuration
- logging: Structured logging configuration
"""
