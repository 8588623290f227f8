"""Adapters – concrete integrations (HTTP)."""
