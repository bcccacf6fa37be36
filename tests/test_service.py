"""
End-to-end tests for MediaResolverService against a mock catalog.
"""
import asyncio

import pytest

from media_resolver.interaction import IntentType
from media_resolver.models import MediaType
from media_resolver.service import MediaResolverService
from media_resolver.strategies import (
    ConceptStrategy,
    DiscoverStrategy,
    HELP_TEXT,
    KeywordFallbackStrategy,
    TitleSimilarityStrategy,
    TopRatedStrategy,
    TrendingStrategy,
    UnresolvedStrategy,
)
from media_resolver.vocabulary import LANGUAGES


def resolve(service, message):
    return asyncio.run(service.resolve(message))


class TestScenarios:
    """Representative messages from classification to reply."""

    def test_telugu_horror_movies(self, service, catalog, make_movie):
        catalog.discover.return_value = [make_movie(1, "Arundhati", release_date="2009-01-16")]

        reply = resolve(service, "Telugu horror movies")

        catalog.discover.assert_awaited_once_with(
            MediaType.MOVIE,
            {"sort_by": "popularity.desc", "with_genres": "27", "with_original_language": "te"},
        )
        assert reply.items[0].title == "Arundhati"
        assert reply.items[0].year == "2009"

    def test_movies_like_inception(self, service, catalog, make_movie):
        catalog.discover.return_value = [
            make_movie(27205, "Inception"),
            make_movie(1, "Tenet"),
            make_movie(2, "The Matrix"),
        ]

        reply = resolve(service, "Movies like Inception")

        catalog.discover.assert_awaited_once_with(
            MediaType.MOVIE,
            {"sort_by": "popularity.desc", "with_genres": "12,28,878", "vote_average.gte": 6},
        )
        assert "Inception" not in [item.title for item in reply.items]
        assert len(reply.items) == 2
        catalog.search.assert_not_awaited()

    def test_best_tv_shows(self, service, catalog, make_show):
        catalog.discover.return_value = [make_show(1396, "Breaking Bad")]

        reply = resolve(service, "best tv shows")

        catalog.discover.assert_awaited_once_with(
            MediaType.TV, {"sort_by": "vote_average.desc", "vote_count.gte": 200}
        )
        assert reply.items[0].media_type == "tv"

    def test_trending(self, service, catalog):
        resolve(service, "trending")

        catalog.trending.assert_awaited_once_with(MediaType.MOVIE, "week")

    @pytest.mark.parametrize("message", ["", "ok", "a movie"])
    def test_unresolved(self, service, catalog, message):
        reply = resolve(service, message)

        assert reply.text == HELP_TEXT
        assert reply.items == []
        catalog.discover.assert_not_awaited()
        catalog.trending.assert_not_awaited()
        catalog.search.assert_not_awaited()
        catalog.keyword_search.assert_not_awaited()

    def test_unknown_title_uses_live_similarity(self, service, catalog, make_movie):
        catalog.search.return_value = [make_movie(603, "The Matrix")]
        catalog.recommendations.return_value = [make_movie(604, "The Matrix Reloaded")]

        reply = resolve(service, "movies like the matrix")

        catalog.search.assert_awaited_once_with(MediaType.MOVIE, "the matrix")
        catalog.recommendations.assert_awaited_once_with(MediaType.MOVIE, 603)
        assert [item.title for item in reply.items] == ["The Matrix Reloaded"]

    def test_keyword_fallback(self, service, catalog, make_movie):
        catalog.keyword_search.return_value = [{"id": 4379, "name": "time travel"}]
        catalog.discover.return_value = [make_movie(1, "Primer")]

        reply = resolve(service, "time travel")

        assert catalog.discover.await_args.args[1]["with_keywords"] == "4379"
        assert reply.text == 'Here are top matches for "time travel" 👇'


class TestProperties:
    """Properties that hold across inputs."""

    @pytest.mark.parametrize("keyword, code", LANGUAGES[:8])
    def test_language_only_discover(self, service, catalog, keyword, code):
        if keyword == "malayalam":
            code = "ms"

        resolve(service, f"{keyword} movies")

        params = catalog.discover.await_args.args[1]
        assert params.get("with_original_language") == code
        assert "with_genres" not in params

    def test_classification_is_idempotent(self, catalog):
        service = MediaResolverService(catalog)

        resolve(service, "hindi comedy movies")
        resolve(service, "hindi comedy movies")

        first, second = catalog.discover.await_args_list
        assert first == second

    @pytest.mark.parametrize(
        "message", ["best tv shows", "top rated movies", "good korean dramas"]
    )
    def test_top_rated_filters(self, service, catalog, message):
        resolve(service, message)

        params = catalog.discover.await_args.args[1]
        assert params["sort_by"] == "vote_average.desc"
        assert params["vote_count.gte"] == 200

    def test_never_more_than_five_items(self, service, catalog, make_movie):
        catalog.discover.return_value = [make_movie(i, f"Movie {i}") for i in range(20)]

        reply = resolve(service, "action movies")

        assert len(reply.items) == 5

    def test_result_limit_is_configurable(self, catalog, make_movie):
        catalog.discover.return_value = [make_movie(i, f"Movie {i}") for i in range(20)]
        service = MediaResolverService(catalog, result_limit=3)

        reply = resolve(service, "action movies")

        assert len(reply.items) == 3

    def test_concurrent_requests_are_independent(self, catalog, make_movie, make_show):
        async def discover(media_type, params):
            await asyncio.sleep(0)
            if media_type is MediaType.TV:
                return [make_show(1, "Dark")]
            return [make_movie(2, "Tumbbad")]

        catalog.discover.side_effect = discover
        service = MediaResolverService(catalog)

        async def both():
            return await asyncio.gather(
                service.resolve("crime series"),
                service.resolve("hindi horror movies"),
            )

        tv_reply, movie_reply = asyncio.run(both())

        assert [item.title for item in tv_reply.items] == ["Dark"]
        assert [item.title for item in movie_reply.items] == ["Tumbbad"]


class TestStrategySelection:
    """Tests for classify and select_strategy."""

    @pytest.mark.parametrize(
        "message, strategy_type",
        [
            ("movies like inception", ConceptStrategy),
            ("movies like the matrix", TitleSimilarityStrategy),
            ("trending shows", TrendingStrategy),
            ("best movies", TopRatedStrategy),
            ("horror movies", DiscoverStrategy),
            ("time travel", KeywordFallbackStrategy),
            ("ok", UnresolvedStrategy),
        ],
    )
    def test_select_strategy(self, service, message, strategy_type):
        strategy = service.select_strategy(service.classify(message))

        assert type(strategy) is strategy_type

    def test_classify_makes_no_catalog_calls(self, service, catalog):
        intent = service.classify("Telugu horror movies")

        assert intent.intent_type == IntentType.DISCOVER
        assert not catalog.method_calls
