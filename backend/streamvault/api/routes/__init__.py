"""
API route modules.

Import all route modules here for easy access.
"""

from streamvault.api.routes import advertisements, content

__all__ = ["advertisements", "content"]
