"""
Static and demo data for the Invoice Dashboard.

This package contains fixture data used by DemoInvoiceService for
development, testing, and demonstrations without a running backend.

Modules:
- demo_invoices: Pre-populated InvoiceRecord objects
"""
