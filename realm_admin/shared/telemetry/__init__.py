"""Telemetry: logging setup."""

from realm_admin.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
