"""Account selectors: a user is designated either by numeric ID or by screen name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserID:
    """Select an account by its numeric ID."""

    id: int


@dataclass(frozen=True)
class ScreenName:
    """Select an account by its screen name (without the leading ``@``)."""

    name: str


AccountSelector = UserID | ScreenName
AccountLike = AccountSelector | int | str


def as_account(value: AccountLike) -> AccountSelector:
    """Convert an int, str or selector into an ``AccountSelector``."""
    if isinstance(value, (UserID, ScreenName)):
        return value
    # bool is an int subclass but never a valid account ID
    if isinstance(value, bool):
        raise TypeError("bool is not a valid account selector")
    if isinstance(value, int):
        return UserID(value)
    if isinstance(value, str):
        return ScreenName(value.lstrip("@"))
    raise TypeError(f"Cannot build an account selector from {type(value).__name__}")


def account_params(selector: AccountSelector, prefix: str = "") -> dict[str, str]:
    """Render a selector as request parameters.

    Exactly one parameter is produced: ``<prefix>user_id`` for numeric IDs,
    ``<prefix>screen_name`` for screen names. Relation lookups use the
    ``source_``/``target_`` prefixes, whose ID key is ``<prefix>id``.
    """
    if isinstance(selector, UserID):
        key = f"{prefix}id" if prefix else "user_id"
        return {key: str(selector.id)}
    return {f"{prefix}screen_name": selector.name}


def split_accounts(accounts: list[AccountSelector]) -> dict[str, str]:
    """Group mixed selectors into comma-joined ``user_id``/``screen_name`` params.

    Empty groups are left out.
    """
    ids = [str(acct.id) for acct in accounts if isinstance(acct, UserID)]
    names = [acct.name for acct in accounts if isinstance(acct, ScreenName)]
    params: dict[str, str] = {}
    if ids:
        params["user_id"] = ",".join(ids)
    if names:
        params["screen_name"] = ",".join(names)
    return params
