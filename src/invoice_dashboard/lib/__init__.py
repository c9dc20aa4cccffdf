"""
Local library modules shared across the Invoice Dashboard.

Modules:
    logs: Logging utilities
    objects: Object hashing and serialization
"""

from invoice_dashboard.lib import logs, objects

__all__ = ["logs", "objects"]
