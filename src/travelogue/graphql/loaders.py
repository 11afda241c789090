"""
Per-request DataLoaders for relational fields.

Each loader re-fetches its parents by identifier with the relation eagerly
included, batching every parent requested in the same tick into one query.
Missing parents resolve to an empty list.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from strawberry.dataloader import DataLoader

from ..database.connection import get_async_session
from ..dbmodels import Albums, BlogPosts, Countries
from .types.album import Album, Picture
from .types.blog_post import BlogPost
from .types.country import Country


async def load_album_pictures(keys: list[str]) -> list[list[Picture]]:
    """Batch load pictures by album ID."""
    async with get_async_session() as session:
        stmt = select(Albums).where(Albums.id.in_(keys)).options(selectinload(Albums.pictures))
        result = await session.execute(stmt)
        albums_map = {
            album.id: [Picture.from_model(p) for p in album.pictures]
            for album in result.scalars().all()
        }
        return [albums_map.get(key, []) for key in keys]


async def load_blog_post_albums(keys: list[str]) -> list[list[Album]]:
    """Batch load albums by blog post ID."""
    async with get_async_session() as session:
        stmt = (
            select(BlogPosts).where(BlogPosts.id.in_(keys)).options(selectinload(BlogPosts.albums))
        )
        result = await session.execute(stmt)
        posts_map = {
            post.id: [Album.from_model(a) for a in post.albums] for post in result.scalars().all()
        }
        return [posts_map.get(key, []) for key in keys]


async def load_blog_post_countries(keys: list[str]) -> list[list[Country]]:
    """Batch load countries by blog post ID."""
    async with get_async_session() as session:
        stmt = (
            select(BlogPosts)
            .where(BlogPosts.id.in_(keys))
            .options(selectinload(BlogPosts.countries))
        )
        result = await session.execute(stmt)
        posts_map = {
            post.id: [Country.from_model(c) for c in post.countries]
            for post in result.scalars().all()
        }
        return [posts_map.get(key, []) for key in keys]


async def load_country_blog_posts(keys: list[str]) -> list[list[BlogPost]]:
    """Batch load blog posts by country ID."""
    async with get_async_session() as session:
        stmt = (
            select(Countries)
            .where(Countries.id.in_(keys))
            .options(selectinload(Countries.blog_posts))
        )
        result = await session.execute(stmt)
        countries_map = {
            country.id: [BlogPost.from_model(b) for b in country.blog_posts]
            for country in result.scalars().all()
        }
        return [countries_map.get(key, []) for key in keys]


class Loaders:
    def __init__(self):
        self.album_pictures = DataLoader(load_fn=load_album_pictures)
        self.blog_post_albums = DataLoader(load_fn=load_blog_post_albums)
        self.blog_post_countries = DataLoader(load_fn=load_blog_post_countries)
        self.country_blog_posts = DataLoader(load_fn=load_country_blog_posts)
