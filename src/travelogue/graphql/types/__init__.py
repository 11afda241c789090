"""GraphQL object types."""

from .album import Album, Picture
from .blog_post import BlogPost
from .country import Country
from .enums import SortOrder

__all__ = ["Album", "BlogPost", "Country", "Picture", "SortOrder"]
