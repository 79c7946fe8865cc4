"""Tests for fetcher loading and base class behaviour."""

import pytest

from ig_media_api.core.http_client import HTTPClient
from ig_media_api.extractors import BaseFetcher, CookieFetcher, FetchError, GraphqlFetcher, get_fetcher
from ig_media_api.models.enums import Strategy


class TestFetcherFactory:
    def test_all_strategies_have_fetchers(self, settings):
        for strategy in Strategy:
            fetcher = get_fetcher(strategy, settings=settings)
            assert isinstance(fetcher, BaseFetcher)
            assert fetcher.strategy == strategy

    def test_fetcher_class_names_match(self, settings):
        assert isinstance(get_fetcher(Strategy.GRAPHQL, settings=settings), GraphqlFetcher)
        assert isinstance(get_fetcher(Strategy.COOKIE, settings=settings), CookieFetcher)

    def test_settings_injected(self, settings):
        fetcher = get_fetcher(Strategy.COOKIE, settings=settings)
        assert fetcher.settings is settings

    def test_default_settings_from_environment(self):
        fetcher = get_fetcher(Strategy.GRAPHQL)
        assert fetcher.settings.x_ig_app_id

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            get_fetcher("carrier-pigeon")


class TestFetchError:
    def test_message(self):
        err = FetchError("something broke", status=404)
        assert str(err) == "something broke"
        assert err.status == 404
        assert err.details is None

    def test_with_details(self):
        err = FetchError("nope", status=403, details="Forbidden")
        assert err.details == "Forbidden"


@pytest.mark.asyncio
class TestClientOwnership:
    async def test_shared_client_not_closed(self, settings):
        http = HTTPClient()
        fetcher = GraphqlFetcher(settings=settings, http=http)
        await fetcher.close()
        assert fetcher.http is http

    async def test_own_client_released(self, settings):
        fetcher = GraphqlFetcher(settings=settings)
        first = fetcher.http
        await fetcher.close()
        assert fetcher.http is not first
