"""
Shared Utilities
===============

Common utilities and helper functions used across the application.

Modules:
- html: HTML entity escaping and unescaping
"""
