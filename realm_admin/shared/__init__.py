"""Cross-cutting helpers (logging, time, ids)."""
