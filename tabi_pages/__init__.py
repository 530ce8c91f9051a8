"""
Tabirun Pages
=============

Server-side rendering of composed pages into complete HTML documents that a
client can later hydrate.

This package provides:
- Component trees with an explicit render context and render mode
- Deferred markdown rendering with Pygments syntax highlighting
- Head content relocation into the document head
- Page data serialization for client hydration
"""

__version__ = "1.0.0"
__author__ = "Tabirun Pages Team"
