"""
Demonstration dataset for a freshly created database.

Seeding is not idempotent: re-running it against a populated database
violates the unique constraints on country ids and picture urls, and the
resulting IntegrityError is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Albums, BlogPosts, Countries, Pictures
from ..logging import get_logger

logger = get_logger(__name__)

PICSUM_BASE_URL = "https://picsum.photos/id"

# ISO 3166-1 numeric codes
USA = "840"
JAPAN = "392"


@dataclass
class SeedSummary:
    """Identifiers of the rows created by a seed run."""

    album_ids: list[str] = field(default_factory=list)
    country_ids: list[str] = field(default_factory=list)
    blog_post_ids: list[str] = field(default_factory=list)


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


def _album(title: str, start: datetime, end: datetime, picture_ids: list[int]) -> Albums:
    return Albums(
        title=title,
        start_date=start,
        end_date=end,
        pictures=[Pictures(url=f"{PICSUM_BASE_URL}/{pid}") for pid in picture_ids],
    )


async def seed_initial_data(db: AsyncSession) -> SeedSummary:
    """
    Insert the demonstration albums, countries and blog posts.

    Creates two albums with four pictures each, two countries and two blog
    posts cross-linked to them.

    Args:
        db: Database session

    Returns:
        SeedSummary with the identifiers of everything created
    """
    logger.info("Starting database seeding")

    mountain = _album(
        "Mountain Adventure", _utc(2019, 10, 26), _utc(2019, 12, 3), [444, 359, 357, 772]
    )
    urban = _album(
        "Urban Exploration", _utc(2020, 11, 1), _utc(2020, 12, 7), [360, 250, 458, 12]
    )

    usa = Countries(id=USA)
    japan = Countries(id=JAPAN)

    grand_canyon = BlogPosts(
        title="Exploring the Grand Canyon",
        content="The Grand Canyon, a colossal chasm carved by the Colorado River...",
        publication_date=_utc(2016, 5, 18),
        start_date=_utc(2019, 9, 30),
        end_date=_utc(2019, 11, 21),
        albums=[mountain],
        countries=[usa],
    )
    tokyo = BlogPosts(
        title="A Journey Through Tokyo",
        content=(
            "In the heart of Japan, Tokyo stands as a beacon of modernity "
            "fused with age-old traditions..."
        ),
        publication_date=_utc(2021, 6, 15),
        start_date=_utc(2016, 8, 30),
        end_date=_utc(2016, 11, 1),
        albums=[mountain, urban],
        countries=[japan],
    )

    db.add_all([mountain, urban, usa, japan, grand_canyon, tokyo])
    await db.commit()

    summary = SeedSummary(
        album_ids=[mountain.id, urban.id],
        country_ids=[usa.id, japan.id],
        blog_post_ids=[grand_canyon.id, tokyo.id],
    )

    logger.info(
        "Database seeding completed",
        albums=len(summary.album_ids),
        countries=len(summary.country_ids),
        blog_posts=len(summary.blog_post_ids),
    )

    return summary
