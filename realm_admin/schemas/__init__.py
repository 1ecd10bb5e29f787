"""Request/response schemas (pydantic)."""
