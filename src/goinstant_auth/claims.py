"""
goinstant_auth.claims

Claim mapping and signing-input serialization.

Responsibilities:
- Hold the rename tables (user data key -> claim name) as explicit configuration.
- Validate user data, groups and extra headers.
- Build the JOSE header and the claim set, then render `header.payload`.

Mapping never mutates caller data. A renamed key is removed and re-added at the
end of the output mapping, so claim order is stable for a given input.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from goinstant_auth.codec import encode_json
from goinstant_auth.errors import InputShapeError, MissingClaimError
from goinstant_auth.models import UserIdentity

AUDIENCE = "goinstant.net"


@dataclass(frozen=True, slots=True)
class ClaimTables:
    # Required tables fail on a missing key; optional tables skip it.
    required: Mapping[str, str] = field(
        default_factory=lambda: {"domain": "iss", "id": "sub", "displayName": "dn"}
    )
    optional: Mapping[str, str] = field(default_factory=lambda: {"groups": "g"})
    group_required: Mapping[str, str] = field(
        default_factory=lambda: {"id": "id", "displayName": "dn"}
    )
    audience: str = AUDIENCE

    def __post_init__(self) -> None:
        # Read-only views; shared defaults cannot be edited in place.
        for name in ("required", "optional", "group_required"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def groups_claim(self) -> str | None:
        return self.optional.get("groups")


DEFAULT_CLAIM_TABLES = ClaimTables()


def map_required_claims(
    claims: Mapping[str, Any],
    table: Mapping[str, str],
    *,
    group_index: int | None = None,
) -> dict[str, Any]:
    out = dict(claims)
    for key, claim_name in table.items():
        value = out.pop(key, None)
        if value is None:
            raise MissingClaimError(key, group_index=group_index)
        out[claim_name] = value
    return out


def map_optional_claims(claims: Mapping[str, Any], table: Mapping[str, str]) -> dict[str, Any]:
    out = dict(claims)
    for key, claim_name in table.items():
        if key not in out:
            continue
        value = out.pop(key)
        if value is not None:
            out[claim_name] = value
    return out


def build_header(extra_headers: Mapping[str, Any] | None = None) -> dict[str, Any]:
    if extra_headers is None:
        extra_headers = {}
    if not isinstance(extra_headers, Mapping):
        raise InputShapeError("Extra Headers must be an Object")
    header = dict(extra_headers)
    header["typ"] = "JWT"
    header["alg"] = "HS256"
    return header


def _user_data(user_data: Any) -> Mapping[str, Any]:
    if isinstance(user_data, UserIdentity):
        return user_data.to_claims()
    if not isinstance(user_data, Mapping):
        raise InputShapeError("User Data must be an Object")
    return user_data


def build_claims(user_data: Any, *, tables: ClaimTables = DEFAULT_CLAIM_TABLES) -> dict[str, Any]:
    claims = map_required_claims(_user_data(user_data), tables.required)
    claims = map_optional_claims(claims, tables.optional)

    groups_claim = tables.groups_claim
    if groups_claim is not None and groups_claim in claims:
        groups = claims[groups_claim]
        if not isinstance(groups, (list, tuple)):
            raise InputShapeError("Groups must be in an Array")
        mapped = []
        for i, group in enumerate(groups):
            if not isinstance(group, Mapping):
                raise InputShapeError(f"group {i} must be an Object")
            mapped.append(map_required_claims(group, tables.group_required, group_index=i))
        claims[groups_claim] = mapped

    # Audience is fixed; a caller-supplied `aud` is overwritten.
    claims["aud"] = tables.audience
    return claims


def serialize(
    user_data: Any,
    extra_headers: Mapping[str, Any] | None = None,
    *,
    tables: ClaimTables = DEFAULT_CLAIM_TABLES,
) -> str:
    """
    Build the signing input (`<header_b64>.<payload_b64>`).

    All validation happens here, before any key material is touched. The
    order of checks is: user data type, extra headers type, required claims,
    groups.
    """
    payload_source = _user_data(user_data)
    header = build_header(extra_headers)
    claims = build_claims(payload_source, tables=tables)
    return f"{encode_json(header)}.{encode_json(claims)}"


# --- Module Notes -----------------------------------------------------------
# `None` counts as absent for both required and optional keys.
