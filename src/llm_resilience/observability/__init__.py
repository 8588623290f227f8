"""Observability – structured logging for retry and circuit-breaker activity."""
