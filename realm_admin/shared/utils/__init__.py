"""Shared utilities."""

from realm_admin.shared.utils.datetime import ensure_utc, retention_cutoff, utc_now
from realm_admin.shared.utils.emails import check_email_address
from realm_admin.shared.utils.generators import generate_cuid

__all__ = [
    "check_email_address",
    "ensure_utc",
    "generate_cuid",
    "retention_cutoff",
    "utc_now",
]
