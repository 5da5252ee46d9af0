"""
Request dependencies shared by the endpoints.

FastAPI evaluates these before the endpoint body runs, so a
dependency that raises stops the request without invoking the
handler.  ``resolve_user`` turns the ``{user_id}`` path segment into a
``ResolvedUser``; the validation dependencies check the query string
or body against a rule set and hand the endpoint the checked values.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Body, Depends, Request

from mock_users_api.app.core.errors import NotFoundError
from mock_users_api.app.core.validation import check_rules
from mock_users_api.app.schemas.user import CREATE_USER_RULES, LIST_USERS_QUERY_RULES
from mock_users_api.app.services.product_service import ProductCatalog
from mock_users_api.app.services.user_service import UserStore


USER_NOT_FOUND = "User not found"

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ResolvedUser:
    """Position and id of the user addressed by the request path."""

    index: int
    user_id: int


@dataclass(frozen=True)
class UserListQuery:
    filter: Optional[Any] = None
    value: Optional[Any] = None


async def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


async def get_product_catalog(request: Request) -> ProductCatalog:
    return request.app.state.product_catalog


def parse_user_id(raw: str) -> Optional[int]:
    """Parse the leading base-10 integer of a path id.

    Trailing characters are ignored, so ``"1abc"`` and ``"1.5"`` both
    parse to ``1``.  Input without leading digits yields ``None``.
    """
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return None
    return int(match.group(1))


async def resolve_user(user_id: str, store: UserStore = Depends(get_user_store)) -> ResolvedUser:
    """Locate the user named in the path or answer 404."""
    parsed = parse_user_id(user_id)
    index = store.find(parsed) if parsed is not None else None
    if index is None:
        raise NotFoundError(USER_NOT_FOUND)
    return ResolvedUser(index=index, user_id=parsed)


async def user_list_query(request: Request) -> UserListQuery:
    """Validate ``filter`` and ``value`` from the query string.

    A key repeated in the query string is passed to the rules as a
    list, so it fails the string checks.
    """
    params = request.query_params
    source: Dict[str, Any] = {}
    for key in params.keys():
        values = params.getlist(key)
        source[key] = values[0] if len(values) == 1 else values
    check_rules(LIST_USERS_QUERY_RULES, source)
    return UserListQuery(filter=source.get("filter"), value=source.get("value"))


async def new_user_body(payload: Optional[Dict[str, Any]] = Body(None)) -> Dict[str, Any]:
    """Validate the body of a user creation request."""
    body = payload or {}
    check_rules(CREATE_USER_RULES, body)
    return body
