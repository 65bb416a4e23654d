"""User management module."""
