# src/social_graph/services/__init__.py
"""User account operations built on the transport and pagination layers."""

from . import users

__all__ = ["users"]
