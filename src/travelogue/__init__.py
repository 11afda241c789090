"""
Travelogue Backend
GraphQL API over travel albums, pictures, blog posts and countries
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
