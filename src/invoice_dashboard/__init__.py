"""
Invoice Dashboard: A Reflex application for browsing invoice records.

This package provides a web interface for searching, filtering and
summarizing invoice records served by a REST backend, together with
spreadsheet upload and CSV export.

Subpackages:
- components: Reusable Reflex UI components
- models: Data models and serialization
- pipeline: Filtering, statistics, pagination and facet extraction
- services: Data access layer (demo and REST implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
