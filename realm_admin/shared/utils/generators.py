"""Primary key generation: every table uses CUID2 string ids."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 (lowercase alphanumeric, starts with a letter)."""
    return str(_next_cuid())
