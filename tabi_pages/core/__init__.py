"""
Core Rendering Logic
===================

Core modules for turning pages and layouts into hydratable HTML documents.

Modules:
- tree: Component trees, render context and synchronous rendering
- markers: Deferred markdown and head marker components
- markdown: Highlighter lifecycle, markdown rendering and marker processing
- head: Head marker extraction
- rendering: Composition, serialization, document assembly and orchestration
"""
