"""Security helpers (JWT)."""
