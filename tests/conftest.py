"""
Shared fixtures: a mock catalog and record builders.
"""
from unittest.mock import AsyncMock, Mock

import pytest

from media_resolver.result_normalizer import ResultNormalizer
from media_resolver.service import MediaResolverService


@pytest.fixture
def catalog():
    """Create a mock catalog whose calls all succeed with no results."""
    catalog = Mock()
    catalog.search = AsyncMock(return_value=[])
    catalog.discover = AsyncMock(return_value=[])
    catalog.trending = AsyncMock(return_value=[])
    catalog.recommendations = AsyncMock(return_value=[])
    catalog.keyword_search = AsyncMock(return_value=[])
    return catalog


@pytest.fixture
def normalizer():
    return ResultNormalizer()


@pytest.fixture
def service(catalog):
    return MediaResolverService(catalog)


@pytest.fixture
def make_movie():
    """Build a movie-shaped catalog record."""
    def _make(id, title, release_date="2010-07-16", vote_average=8.0, poster_path="/poster.jpg"):
        return {
            "id": id,
            "title": title,
            "release_date": release_date,
            "vote_average": vote_average,
            "poster_path": poster_path,
        }
    return _make


@pytest.fixture
def make_show():
    """Build a TV-shaped catalog record."""
    def _make(id, name, first_air_date="2017-12-01", vote_average=8.4, poster_path="/show.jpg"):
        return {
            "id": id,
            "name": name,
            "first_air_date": first_air_date,
            "vote_average": vote_average,
            "poster_path": poster_path,
        }
    return _make
