"""Lookups, relationship queries and paginated listings of user accounts.

Every call takes the credentials to sign with as an explicit argument and an
optional ``transport``; when omitted the shared default transport is used.

Listing calls return lazy iterators (see ``social_graph.cursor``) and perform
no request until iterated. Everything else is a single request whose decoded
body is returned inside a ``Response`` with its rate-limit snapshot.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from social_graph import links
from social_graph.account import (
    AccountLike,
    ScreenName,
    UserID,
    account_params,
    as_account,
    split_accounts,
)
from social_graph.auth import AnyCredentials
from social_graph.core.settings import settings
from social_graph.cursor import CursorIterator, PageFetcher, SearchIterator
from social_graph.parsing import decode_single
from social_graph.schemas.common import Response
from social_graph.schemas.user import RelationLookup, Relationship, TwitterUser
from social_graph.transport import Transport, get_transport

__all__ = [
    "lookup_ids",
    "lookup_names",
    "lookup",
    "show",
    "relation",
    "relation_lookup",
    "follow",
    "unfollow",
    "update_follow",
    "friends_no_retweets",
    "search",
    "friends_of",
    "friends_ids",
    "followers_of",
    "followers_ids",
    "blocks",
    "blocks_ids",
    "mutes",
    "mutes_ids",
    "incoming_requests",
    "outgoing_requests",
]

logger = logging.getLogger(__name__)


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def lookup_ids(
    ids: Iterable[int],
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[list[TwitterUser]]:
    """Look up a set of users by numeric ID."""
    return lookup([UserID(user_id) for user_id in ids], credentials, transport)


def lookup_names(
    names: Iterable[str],
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[list[TwitterUser]]:
    """Look up a set of users by screen name."""
    return lookup([ScreenName(name) for name in names], credentials, transport)


def lookup(
    accounts: Iterable[AccountLike],
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[list[TwitterUser]]:
    """Look up a mixed set of users by ID and screen name, as applicable."""
    params = split_accounts([as_account(acct) for acct in accounts])
    response = (transport or get_transport()).post(links.LOOKUP, params, credentials)
    return decode_single(response, list[TwitterUser])


def show(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[TwitterUser]:
    """Look up a single user."""
    params = account_params(as_account(account))
    response = (transport or get_transport()).get(links.SHOW, params, credentials)
    return decode_single(response, TwitterUser)


def relation(
    source: AccountLike,
    target: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[Relationship]:
    """Look up the relationship between two arbitrary users."""
    params = {
        **account_params(as_account(source), prefix="source_"),
        **account_params(as_account(target), prefix="target_"),
    }
    response = (transport or get_transport()).get(links.FRIENDSHIP_SHOW, params, credentials)
    return decode_single(response, Relationship)


def relation_lookup(
    accounts: Iterable[AccountLike],
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[list[RelationLookup]]:
    """Look up how the authenticated user is connected to each given account."""
    params = split_accounts([as_account(acct) for acct in accounts])
    response = (transport or get_transport()).get(links.FRIENDSHIP_LOOKUP, params, credentials)
    return decode_single(response, list[RelationLookup])


def follow(
    account: AccountLike,
    notifications: bool,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[TwitterUser]:
    """Follow a user and choose whether to enable device notifications.

    Following a protected account sends a follow request; the returned user
    is the same either way.
    """
    params = account_params(as_account(account))
    params["follow"] = _bool_param(notifications)
    response = (transport or get_transport()).post(links.FOLLOW, params, credentials)
    logger.info("Followed %s", params.get("screen_name") or params.get("user_id"))
    return decode_single(response, TwitterUser)


def unfollow(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[TwitterUser]:
    """Unfollow a user. Unfollowing an account that is not followed succeeds."""
    params = account_params(as_account(account))
    response = (transport or get_transport()).post(links.UNFOLLOW, params, credentials)
    logger.info("Unfollowed %s", params.get("screen_name") or params.get("user_id"))
    return decode_single(response, TwitterUser)


def update_follow(
    account: AccountLike,
    credentials: AnyCredentials,
    notifications: bool | None = None,
    retweets: bool | None = None,
    transport: Transport | None = None,
) -> Response[Relationship]:
    """Update notification and retweet settings for a followed user.

    Options left as ``None`` are not sent. This never follows the account.
    """
    params = account_params(as_account(account))
    if notifications is not None:
        params["device"] = _bool_param(notifications)
    if retweets is not None:
        params["retweets"] = _bool_param(retweets)
    response = (transport or get_transport()).post(links.FRIENDSHIP_UPDATE, params, credentials)
    return decode_single(response, Relationship)


def friends_no_retweets(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> Response[list[int]]:
    """Return the IDs the authenticated user has disabled retweets from."""
    response = (transport or get_transport()).get(links.FRIENDS_NO_RETWEETS, None, credentials)
    return decode_single(response, list[int])


def search(
    query: str,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> SearchIterator:
    """Search users matching ``query``; 10 results per page by default, at most 20."""
    return SearchIterator(transport or get_transport(), query, credentials)


def _user_listing(
    endpoint: str,
    credentials: AnyCredentials,
    transport: Transport | None,
    account: AccountLike | None = None,
    page_size: int | None = None,
) -> CursorIterator[TwitterUser]:
    # Only listings with a default page size accept a count parameter
    fetcher = PageFetcher.users(
        transport or get_transport(), endpoint, supports_page_size=page_size is not None
    )
    selector = as_account(account) if account is not None else None
    return CursorIterator(fetcher, credentials, selector, page_size)


def _id_listing(
    endpoint: str,
    credentials: AnyCredentials,
    transport: Transport | None,
    account: AccountLike | None = None,
    page_size: int | None = None,
) -> CursorIterator[int]:
    fetcher = PageFetcher.ids(
        transport or get_transport(), endpoint, supports_page_size=page_size is not None
    )
    selector = as_account(account) if account is not None else None
    return CursorIterator(fetcher, credentials, selector, page_size)


def friends_of(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[TwitterUser]:
    """Iterate over the users an account follows (its "friends").

    Defaults to 20 users per request; the maximum is 200.
    """
    return _user_listing(
        links.FRIENDS_LIST, credentials, transport, account, settings.user_page_size
    )


def friends_ids(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over the IDs of the users an account follows.

    Defaults to 500 IDs per request; the maximum is 5000. Loading IDs only
    needs far fewer requests when the full profiles are not required.
    """
    return _id_listing(links.FRIENDS_IDS, credentials, transport, account, settings.id_page_size)


def followers_of(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[TwitterUser]:
    """Iterate over the users following an account; 20 per request by default."""
    return _user_listing(
        links.FOLLOWERS_LIST, credentials, transport, account, settings.user_page_size
    )


def followers_ids(
    account: AccountLike,
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over the IDs of the users following an account; 500 per request by default."""
    return _id_listing(
        links.FOLLOWERS_IDS, credentials, transport, account, settings.id_page_size
    )


def blocks(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[TwitterUser]:
    """Iterate over the users blocked by the authenticated user.

    The blocks listing has no page size option: ``with_page_size`` is
    accepted before the first request but never sent.
    """
    return _user_listing(links.BLOCKS_LIST, credentials, transport)


def blocks_ids(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over the IDs blocked by the authenticated user."""
    return _id_listing(links.BLOCKS_IDS, credentials, transport)


def mutes(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[TwitterUser]:
    """Iterate over the users muted by the authenticated user.

    Like blocks, the mutes listing has no page size option.
    """
    return _user_listing(links.MUTES_LIST, credentials, transport)


def mutes_ids(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over the IDs muted by the authenticated user."""
    return _id_listing(links.MUTES_IDS, credentials, transport)


def incoming_requests(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over IDs with pending requests to follow the authenticated user.

    Empty unless the authenticated account is protected.
    """
    return _id_listing(links.FRIENDSHIPS_INCOMING, credentials, transport)


def outgoing_requests(
    credentials: AnyCredentials,
    transport: Transport | None = None,
) -> CursorIterator[int]:
    """Iterate over IDs the authenticated user has a pending follow request with."""
    return _id_listing(links.FRIENDSHIPS_OUTGOING, credentials, transport)
