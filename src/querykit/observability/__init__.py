"""Observability – logging."""
