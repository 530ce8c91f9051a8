"""
Test Suite
==========

Test suite matching the tabi_pages/ directory structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Full page rendering and client reproduction
"""
