"""Testing – helpers for libraries and services that compile filter params."""
