"""
Database models for Travelogue (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
constraint names, and exposes `target_metadata` for schema creation.
"""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKeyConstraint,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    TypeDecorator,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_id() -> str:
    """Surrogate key for albums, pictures and blog posts."""
    return str(uuid4())


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp stored as UTC and always read back with a UTC offset.

    SQLite keeps no offset, so values are normalized to UTC wall-clock before
    binding and naive results are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    @staticmethod
    def _as_utc(value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        return self._as_utc(value)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        return self._as_utc(value)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


album_blog_posts = Table(
    "album_blog_posts",
    Base.metadata,
    Column("album_id", String(36), nullable=False),
    Column("blog_post_id", String(36), nullable=False),
    ForeignKeyConstraint(
        ["album_id"],
        ["albums.id"],
        ondelete="CASCADE",
        name="album_blog_posts_album_id_fkey",
    ),
    ForeignKeyConstraint(
        ["blog_post_id"],
        ["blog_posts.id"],
        ondelete="CASCADE",
        name="album_blog_posts_blog_post_id_fkey",
    ),
    PrimaryKeyConstraint("album_id", "blog_post_id", name="album_blog_posts_pkey"),
    Index("idx_album_blog_posts_blog_post", "blog_post_id"),
)


blog_post_countries = Table(
    "blog_post_countries",
    Base.metadata,
    Column("blog_post_id", String(36), nullable=False),
    Column("country_id", String(3), nullable=False),
    ForeignKeyConstraint(
        ["blog_post_id"],
        ["blog_posts.id"],
        ondelete="CASCADE",
        name="blog_post_countries_blog_post_id_fkey",
    ),
    ForeignKeyConstraint(
        ["country_id"],
        ["countries.id"],
        ondelete="CASCADE",
        name="blog_post_countries_country_id_fkey",
    ),
    PrimaryKeyConstraint("blog_post_id", "country_id", name="blog_post_countries_pkey"),
    Index("idx_blog_post_countries_country", "country_id"),
)


class Albums(Base):
    __tablename__ = "albums"
    __table_args__ = (PrimaryKeyConstraint("id", name="albums_pkey"),)

    id: Mapped[str] = mapped_column(String(36), default=generate_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # end_date >= start_date is not enforced
    start_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    pictures: Mapped[list["Pictures"]] = relationship(
        "Pictures",
        uselist=True,
        back_populates="album",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    blog_posts: Mapped[list["BlogPosts"]] = relationship(
        "BlogPosts", secondary=album_blog_posts, uselist=True, back_populates="albums"
    )


class Pictures(Base):
    __tablename__ = "pictures"
    __table_args__ = (
        ForeignKeyConstraint(
            ["album_id"],
            ["albums.id"],
            ondelete="CASCADE",
            name="pictures_album_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="pictures_pkey"),
        UniqueConstraint("url", name="pictures_url_key"),
        Index("idx_pictures_album", "album_id"),
    )

    id: Mapped[str] = mapped_column(String(36), default=generate_id)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    album_id: Mapped[str] = mapped_column(String(36), nullable=False)

    album: Mapped["Albums"] = relationship("Albums", back_populates="pictures")


class BlogPosts(Base):
    __tablename__ = "blog_posts"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="blog_posts_pkey"),
        Index("idx_blog_posts_publication_date", "publication_date"),
    )

    id: Mapped[str] = mapped_column(String(36), default=generate_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    publication_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    start_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    albums: Mapped[list["Albums"]] = relationship(
        "Albums", secondary=album_blog_posts, uselist=True, back_populates="blog_posts"
    )
    countries: Mapped[list["Countries"]] = relationship(
        "Countries", secondary=blog_post_countries, uselist=True, back_populates="blog_posts"
    )


class Countries(Base):
    """Countries keyed by their ISO 3166-1 numeric code (e.g. "840")."""

    __tablename__ = "countries"
    __table_args__ = (PrimaryKeyConstraint("id", name="countries_pkey"),)

    # Externally meaningful key; never generated
    id: Mapped[str] = mapped_column(String(3))

    blog_posts: Mapped[list["BlogPosts"]] = relationship(
        "BlogPosts", secondary=blog_post_countries, uselist=True, back_populates="countries"
    )


target_metadata = Base.metadata

__all__ = [
    "Albums",
    "Base",
    "BlogPosts",
    "Countries",
    "Pictures",
    "UTCDateTime",
    "album_blog_posts",
    "blog_post_countries",
    "generate_id",
    "target_metadata",
]
