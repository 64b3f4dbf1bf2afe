"""Adapters — framework and third-party integrations."""
