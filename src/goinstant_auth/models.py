"""
goinstant_auth.models

Typed user-identity input.

Responsibilities:
- Describe the identity and group shapes accepted by the signer.
- Dump to the plain mapping form (camelCase keys) the claim mapper consumes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GroupClaim(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Group ids are usually integers, but any JSON value is accepted.
    id: Any
    display_name: str = Field(alias="displayName")


class UserIdentity(BaseModel):
    """
    Identity descriptor for one user.

    Fields that are not declared here are carried into the token payload
    unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    domain: str
    id: str
    display_name: str = Field(alias="displayName")
    groups: list[GroupClaim] | None = None

    def to_claims(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


# --- Module Notes -----------------------------------------------------------
# Plain dicts are accepted everywhere a `UserIdentity` is; the model only adds
# early type checking for callers that want it.
