"""Infrastructure: persistence, identity provider and notification adapters."""
