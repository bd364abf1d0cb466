"""
Catstronomy
GraphQL API over the Catstronomy track catalogue
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
