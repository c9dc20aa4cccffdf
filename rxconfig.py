"""Reflex configuration for the Invoice Dashboard application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("APP_PORT", "3000"))

config = rx.Config(
    app_name="invoice_dashboard",
    # Use the src directory structure
    app_module_import="invoice_dashboard.app",
    frontend_port=APP_PORT,
)
