"""
HTTP surface of the clarification chat service.
"""

from .server import create_app

__all__ = ["create_app"]
