"""Bid Watch: multi-criteria search over public procurement notices."""

__version__ = "0.1.0"
