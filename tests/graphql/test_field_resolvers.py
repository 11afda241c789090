"""
Unit tests for relational field resolvers
"""

import asyncio
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import strawberry

from travelogue.config import RelationErrorPolicy
from travelogue.dbmodels import Albums, Countries, Pictures
from travelogue.graphql.loaders import Loaders
from travelogue.graphql.resolvers.album import resolve_album_pictures
from travelogue.graphql.resolvers.blog_post import (
    parse_publication_cutoff,
    resolve_blog_post_countries,
)
from travelogue.graphql.resolvers.country import resolve_country_blog_posts
from travelogue.graphql.types.album import Album, Picture
from travelogue.graphql.types.blog_post import BlogPost
from travelogue.graphql.types.country import Country


@pytest.fixture
def mock_info():
    """Create a mock GraphQL info object with an empty context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {}
    return info


@pytest.fixture
def sample_album():
    return Album(
        id="album-1",
        title="Mountain Adventure",
        start_date=datetime(2019, 10, 26, tzinfo=UTC),
        end_date=datetime(2019, 12, 3, tzinfo=UTC),
    )


@pytest.fixture
def sample_blog_post():
    return BlogPost(
        id="post-1",
        title="Exploring the Grand Canyon",
        content="...",
        publication_date=datetime(2016, 5, 18, tzinfo=UTC),
        start_date=datetime(2019, 9, 30, tzinfo=UTC),
        end_date=datetime(2019, 11, 21, tzinfo=UTC),
    )


def mock_session_returning(rows):
    """Patch target value for get_async_session yielding a session that returns rows."""
    session_factory = MagicMock()
    mock_async_session = AsyncMock()
    session_factory.return_value.__aenter__.return_value = mock_async_session

    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = rows
    mock_async_session.execute.return_value = mock_result
    return session_factory, mock_async_session


class TestAlbumPictures:
    """Tests for resolve_album_pictures."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_pictures_of_album(self, mock_info, sample_album):
        db_album = MagicMock(spec=Albums)
        db_album.id = sample_album.id
        db_album.pictures = [
            Pictures(id="pic-1", url="https://picsum.photos/id/444", album_id=sample_album.id),
            Pictures(id="pic-2", url="https://picsum.photos/id/359", album_id=sample_album.id),
        ]
        session_factory, _ = mock_session_returning([db_album])

        with patch("travelogue.graphql.loaders.get_async_session", session_factory):
            result = await resolve_album_pictures(sample_album, mock_info)

        assert [p.id for p in result] == ["pic-1", "pic-2"]
        assert all(isinstance(p, Picture) for p in result)
        assert isinstance(mock_info.context["loaders"], Loaders)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_album_resolves_to_empty_list(self, mock_info, sample_album):
        session_factory, _ = mock_session_returning([])

        with patch("travelogue.graphql.loaders.get_async_session", session_factory):
            result = await resolve_album_pictures(sample_album, mock_info)

        assert result == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_primed_pictures_skip_the_store(self, mock_info, sample_album):
        primed = [Picture(id="pic-9", url="https://picsum.photos/id/9", album_id=sample_album.id)]
        loaders = Loaders()
        mock_info.context["loaders"] = loaders
        loaders.album_pictures.prime(sample_album.id, primed)

        with patch("travelogue.graphql.loaders.get_async_session") as session_factory:
            result = await resolve_album_pictures(sample_album, mock_info)

        session_factory.assert_not_called()
        assert result == primed

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_store_failure_is_masked_and_logged(self, mock_info, sample_album):
        with (
            patch(
                "travelogue.graphql.loaders.get_async_session",
                side_effect=ConnectionRefusedError("store unavailable"),
            ),
            patch("travelogue.graphql.relations.logger") as mock_logger,
        ):
            result = await resolve_album_pictures(sample_album, mock_info)

        assert result == []
        mock_logger.error.assert_called_once()
        _, kwargs = mock_logger.error.call_args
        assert kwargs["relation"] == "Album.pictures"
        assert kwargs["parent_id"] == sample_album.id
        assert kwargs["error_type"] == "ConnectionRefusedError"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_store_failure_propagates_under_raise_policy(self, mock_info, sample_album):
        mock_info.context["relation_error_policy"] = RelationErrorPolicy.RAISE

        with patch(
            "travelogue.graphql.loaders.get_async_session",
            side_effect=ConnectionRefusedError("store unavailable"),
        ):
            with pytest.raises(ConnectionRefusedError):
                await resolve_album_pictures(sample_album, mock_info)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_configured_policy_applies_without_override(self, mock_info, sample_album):
        with (
            patch(
                "travelogue.graphql.loaders.get_async_session",
                side_effect=ConnectionRefusedError("store unavailable"),
            ),
            patch(
                "travelogue.graphql.relations.settings.relation_error_policy",
                RelationErrorPolicy.RAISE,
            ),
        ):
            with pytest.raises(ConnectionRefusedError):
                await resolve_album_pictures(sample_album, mock_info)


class TestBlogPostCountries:
    """Tests for resolve_blog_post_countries."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_countries(self, mock_info, sample_blog_post):
        db_post = MagicMock()
        db_post.id = sample_blog_post.id
        db_post.countries = [Countries(id="840")]
        session_factory, mock_async_session = mock_session_returning([db_post])

        with patch("travelogue.graphql.loaders.get_async_session", session_factory):
            result = await resolve_blog_post_countries(sample_blog_post, mock_info)

        assert result == [Country(id="840")]
        mock_async_session.execute.assert_awaited_once()


class TestCountryBlogPosts:
    """Tests for resolve_country_blog_posts."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sibling_countries_share_one_lookup(self, mock_info):
        usa = MagicMock()
        usa.id = "840"
        usa.blog_posts = []
        japan = MagicMock()
        japan.id = "392"
        japan.blog_posts = []
        session_factory, mock_async_session = mock_session_returning([usa, japan])

        with patch("travelogue.graphql.loaders.get_async_session", session_factory):
            results = await asyncio.gather(
                resolve_country_blog_posts(Country(id="840"), mock_info),
                resolve_country_blog_posts(Country(id="392"), mock_info),
            )

        assert results == [[], []]
        mock_async_session.execute.assert_awaited_once()


class TestParsePublicationCutoff:
    """Tests for parse_publication_cutoff."""

    @pytest.mark.unit
    def test_date_only_is_midnight_utc(self):
        assert parse_publication_cutoff("2016-05-18") == datetime(2016, 5, 18, tzinfo=UTC)

    @pytest.mark.unit
    def test_offset_is_converted_to_utc(self):
        parsed = parse_publication_cutoff("2021-06-15T09:30:00+09:00")
        assert parsed == datetime(2021, 6, 15, 0, 30, tzinfo=UTC)
        assert parsed.utcoffset().total_seconds() == 0

    @pytest.mark.unit
    def test_malformed_date_raises(self):
        with pytest.raises(ValueError):
            parse_publication_cutoff("18/05/2016")
