"""Core enums and exceptions shared across the package."""
