"""Headless first-person movement sandbox on a grid map."""

__version__ = "0.1.0"