"""
Data Models
===========

Pydantic data models for pages, layouts and the server-to-client wire contract.

Models:
- schemas: Page, layout, render option and serialized page data models
"""
