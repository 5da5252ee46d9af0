"""
User endpoints.

CRUD over the in-memory ``UserStore``.  Routes addressing a single
user depend on ``resolve_user``, so a missing id is answered with 404
before the endpoint body runs.  Listing and creation validate their
input through the rule sets in ``schemas.user``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from mock_users_api.app.schemas.errors import ErrorMessage
from mock_users_api.app.services.user_service import UserStore
from mock_users_api.app.api.deps import (
    ResolvedUser,
    UserListQuery,
    get_user_store,
    new_user_body,
    resolve_user,
    user_list_query,
)


router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorMessage}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage}}


@router.get("", response_model=List[Dict[str, Any]], responses=_BAD_REQUEST)
async def list_users(
    query: UserListQuery = Depends(user_list_query),
    store: UserStore = Depends(get_user_store),
) -> List[Dict[str, Any]]:
    """Return all users, or those matching ``filter``/``value``.

    Filtering only applies when both parameters are given and
    non-empty; the comparison ignores case.
    """
    if query.filter and query.value:
        return store.filter(query.filter, query.value)
    return store.all()


@router.get("/{user_id}", response_model=Dict[str, Any], responses=_NOT_FOUND)
async def get_user(
    resolved: ResolvedUser = Depends(resolve_user),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    return store.get(resolved.index)


@router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
async def create_user(
    body: Dict[str, Any] = Depends(new_user_body),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Create a user from ``username`` and an optional ``displayName``."""
    fields = {"username": body["username"]}
    if "displayName" in body:
        fields["displayName"] = body["displayName"]
    return store.insert(fields)


@router.put("/{user_id}", response_model=Dict[str, Any], responses=_NOT_FOUND)
async def replace_user(
    resolved: ResolvedUser = Depends(resolve_user),
    body: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Replace every field of a user.  The id always comes from the path."""
    return store.replace(resolved.index, resolved.user_id, body or {})


@router.patch("/{user_id}", response_model=Dict[str, Any], responses=_NOT_FOUND)
async def update_user(
    resolved: ResolvedUser = Depends(resolve_user),
    body: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Merge the given fields into a user, keeping the others."""
    return store.merge(resolved.index, body or {})


@router.delete("/{user_id}", response_model=Dict[str, str], responses=_NOT_FOUND)
async def delete_user(
    resolved: ResolvedUser = Depends(resolve_user),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, str]:
    store.remove(resolved.index)
    return {"message": "User deleted"}
