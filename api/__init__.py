"""
HTTP transport for the shuffle service.
"""

from api.app import create_app

__all__ = ["create_app"]
