"""
Request Models

Incoming create/update payloads. Every field is optional at the schema level;
presence rules live in the validation service so that missing fields produce
the same field-keyed errors as blank ones.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    title: Optional[str] = None
    is_active: Optional[bool] = None


class CreateUserRequest(UserRequest):
    """POST /api/users body."""
    pass


class UpdateUserRequest(UserRequest):
    """PUT /api/users/{id} body; absent fields leave the user unchanged."""
    pass
