"""Realm administration service: batch user import and audit trail."""
