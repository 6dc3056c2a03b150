# tests/test_users.py
"""Tests for user lookups, relationship calls and listing constructors."""

import pytest

from social_graph import links
from social_graph.account import ScreenName, UserID
from social_graph.cursor import CursorIterator, SearchIterator
from social_graph.errors import ConfigurationError
from social_graph.schemas.user import Connection, TwitterUser
from social_graph.services import users
from tests.conftest import user_json

RELATIONSHIP_BODY = {
    "relationship": {
        "source": {"id": 1, "screen_name": "me", "following": True},
        "target": {"id": 2, "screen_name": "rustlang", "followed_by": True},
    }
}


class TestSingleShotCalls:
    """Plain request/decode pass-throughs."""

    def test_show_by_screen_name(self, transport, handler, credentials):
        handler.queue(user_json(2, "rustlang"), headers={"x-rate-limit-remaining": "899"})

        result = users.show("rustlang", credentials, transport)

        assert isinstance(result.response, TwitterUser)
        assert result.response.id == 2
        assert result.rate_limit.remaining == 899
        assert handler.requests[0].url.path == links.SHOW
        assert handler.params[0] == {"screen_name": "rustlang"}

    def test_show_by_id(self, transport, handler, credentials):
        handler.queue(user_json(2, "rustlang"))

        users.show(2, credentials, transport)

        assert handler.params[0] == {"user_id": "2"}

    def test_lookup_mixed_accounts(self, transport, handler, credentials):
        handler.queue([user_json(1, "a"), user_json(2, "b")])

        result = users.lookup([1, "b", UserID(3)], credentials, transport)

        assert [user.id for user in result.response] == [1, 2]
        assert handler.requests[0].method == "POST"
        assert handler.params[0] == {"user_id": "1,3", "screen_name": "b"}

    def test_lookup_ids(self, transport, handler, credentials):
        handler.queue([])

        users.lookup_ids([10, 20], credentials, transport)

        assert handler.params[0] == {"user_id": "10,20"}

    def test_lookup_names(self, transport, handler, credentials):
        handler.queue([])

        users.lookup_names(["a", "b"], credentials, transport)

        assert handler.params[0] == {"screen_name": "a,b"}

    def test_relation_uses_source_and_target_params(self, transport, handler, credentials):
        handler.queue(RELATIONSHIP_BODY)

        result = users.relation(1, ScreenName("rustlang"), credentials, transport)

        assert result.response.source.following
        assert handler.requests[0].url.path == links.FRIENDSHIP_SHOW
        assert handler.params[0] == {"source_id": "1", "target_screen_name": "rustlang"}

    def test_relation_lookup(self, transport, handler, credentials):
        handler.queue(
            [{"id": 2, "screen_name": "b", "name": "B", "connections": ["followed_by"]}]
        )

        result = users.relation_lookup(["b"], credentials, transport)

        assert result.response[0].connections == [Connection.FOLLOWED_BY]
        assert handler.requests[0].method == "GET"
        assert handler.params[0] == {"screen_name": "b"}

    def test_follow(self, transport, handler, credentials):
        handler.queue(user_json(2, "rustlang"))

        result = users.follow("rustlang", True, credentials, transport)

        assert result.response.screen_name == "rustlang"
        assert handler.requests[0].url.path == links.FOLLOW
        assert handler.params[0] == {"screen_name": "rustlang", "follow": "true"}

    def test_unfollow(self, transport, handler, credentials):
        handler.queue(user_json(2, "rustlang"))

        users.unfollow(2, credentials, transport)

        assert handler.requests[0].url.path == links.UNFOLLOW
        assert handler.params[0] == {"user_id": "2"}

    def test_update_follow_sends_only_given_options(self, transport, handler, credentials):
        handler.queue(RELATIONSHIP_BODY)
        handler.queue(RELATIONSHIP_BODY)

        users.update_follow("rustlang", credentials, retweets=False, transport=transport)
        users.update_follow(
            "rustlang", credentials, notifications=True, retweets=True, transport=transport
        )

        assert handler.params[0] == {"screen_name": "rustlang", "retweets": "false"}
        assert handler.params[1] == {
            "screen_name": "rustlang",
            "device": "true",
            "retweets": "true",
        }

    def test_friends_no_retweets(self, transport, handler, credentials):
        handler.queue([5, 6])

        result = users.friends_no_retweets(credentials, transport)

        assert result.response == [5, 6]
        assert handler.params[0] == {}


class TestListings:
    """Listing constructors are lazy and pick endpoint, shape and defaults."""

    def test_listings_are_lazy(self, transport, handler, credentials):
        iterator = users.friends_of("rustlang", credentials, transport)

        assert isinstance(iterator, CursorIterator)
        assert handler.requests == []

    @pytest.mark.parametrize(
        ("factory", "endpoint", "count"),
        [
            (users.friends_of, links.FRIENDS_LIST, "20"),
            (users.followers_of, links.FOLLOWERS_LIST, "20"),
        ],
    )
    def test_user_listings(self, transport, handler, credentials, factory, endpoint, count):
        handler.queue({"users": [user_json(7, "x")], "next_cursor": 0, "previous_cursor": 0})

        result = [resp.response for resp in factory("rustlang", credentials, transport)]

        assert [user.id for user in result] == [7]
        assert handler.requests[0].url.path == endpoint
        assert handler.params[0] == {"count": count, "screen_name": "rustlang"}

    @pytest.mark.parametrize(
        ("factory", "endpoint"),
        [(users.friends_ids, links.FRIENDS_IDS), (users.followers_ids, links.FOLLOWERS_IDS)],
    )
    def test_id_listings(self, transport, handler, credentials, factory, endpoint):
        handler.queue({"ids": [7, 8], "next_cursor": 0, "previous_cursor": 0})

        result = [resp.response for resp in factory(99, credentials, transport)]

        assert result == [7, 8]
        assert handler.requests[0].url.path == endpoint
        assert handler.params[0] == {"count": "500", "user_id": "99"}

    @pytest.mark.parametrize(
        ("factory", "endpoint", "body"),
        [
            (users.blocks, links.BLOCKS_LIST, {"users": []}),
            (users.blocks_ids, links.BLOCKS_IDS, {"ids": []}),
            (users.mutes, links.MUTES_LIST, {"users": []}),
            (users.mutes_ids, links.MUTES_IDS, {"ids": []}),
            (users.incoming_requests, links.FRIENDSHIPS_INCOMING, {"ids": []}),
            (users.outgoing_requests, links.FRIENDSHIPS_OUTGOING, {"ids": []}),
        ],
    )
    def test_own_listings_send_no_selector(
        self, transport, handler, credentials, factory, endpoint, body
    ):
        handler.queue({**body, "next_cursor": 0, "previous_cursor": 0})

        assert list(factory(credentials, transport)) == []
        assert handler.requests[0].url.path == endpoint
        assert handler.params[0] == {}

    @pytest.mark.parametrize(
        "factory, body",
        [
            (users.blocks, {"users": [user_json(1, "a")]}),
            (users.blocks_ids, {"ids": [1]}),
            (users.mutes, {"users": [user_json(1, "a")]}),
            (users.mutes_ids, {"ids": [1]}),
            (users.incoming_requests, {"ids": [1]}),
            (users.outgoing_requests, {"ids": [1]}),
        ],
    )
    def test_page_size_hint_not_sent_without_count_option(
        self, transport, handler, credentials, factory, body
    ):
        handler.queue({**body, "next_cursor": 0, "previous_cursor": 0})
        iterator = factory(credentials, transport).with_page_size(5)

        next(iterator)

        assert "count" not in handler.params[0]
        assert iterator.page_size == 5
        with pytest.raises(ConfigurationError):
            iterator.with_page_size(10)

    def test_page_size_override_is_sent(self, transport, handler, credentials):
        handler.queue({"ids": [1], "next_cursor": 0, "previous_cursor": 0})
        iterator = users.friends_ids("rustlang", credentials, transport).with_page_size(5)

        next(iterator)

        assert handler.params[0] == {"screen_name": "rustlang", "count": "5"}

    def test_search(self, transport, handler, credentials):
        handler.queue([user_json(1, "rust")])
        handler.queue([])

        iterator = users.search("rust", credentials, transport)

        assert isinstance(iterator, SearchIterator)
        assert [resp.response.screen_name for resp in iterator] == ["rust"]
        assert handler.requests[0].url.path == links.SEARCH
