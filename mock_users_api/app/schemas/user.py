"""
Schemas for user data.

Users are stored as plain JSON objects because PUT and PATCH accept
arbitrary fields.  ``UserRead`` documents the fields every seeded or
created user starts out with.  The validation rule sets used by the
user endpoints live here as well.
"""

from pydantic import BaseModel, ConfigDict, Field

from mock_users_api.app.core.validation import Rule, is_length, is_string, not_empty


class UserRead(BaseModel):
    """A stored user.  Extra fields added through PUT/PATCH are kept."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., example=1)
    username: str = Field(..., example="anson")
    displayName: str = Field(..., example="Anson")


# GET /api/users?filter=<field>&value=<text>
LIST_USERS_QUERY_RULES = [
    Rule("filter", is_string, "Invalid value", optional=True),
    Rule("filter", is_length(3, 10), "Filter must be 3-10 characters long.", optional=True),
    Rule("value", is_string, "Value must be a string.", optional=True),
]

# POST /api/users
CREATE_USER_RULES = [
    Rule("username", not_empty, "Username can not be empty."),
    Rule(
        "username",
        is_length(5, 32),
        "Username must be at least 5 characters with a max of 32 characters",
    ),
]
