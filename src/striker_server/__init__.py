"""striker-server: Mock backend for Hat-Trick customized jersey tools.

This package serves a jersey catalog, a player list and the Hat-Trick
add-to-cart operation as tools for AI tool-invoking callers, over a REST API.
"""

from striker_server.app import create_app

__version__ = "0.1.0"

__all__ = ["create_app", "__version__"]
