"""Adapters – optional framework integrations."""
