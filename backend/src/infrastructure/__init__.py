"""Adapters implementing domain ports on top of external systems."""
