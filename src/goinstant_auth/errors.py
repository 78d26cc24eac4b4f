"""
goinstant_auth.errors

Exception types raised while building tokens.

Responsibilities:
- Separate construction errors, input-shape errors and missing-claim errors.
- Keep the builtin base classes (`TypeError`/`ValueError`) callers already expect.
"""

from __future__ import annotations


class GoInstantAuthError(Exception):
    pass


class SecretKeyError(GoInstantAuthError, TypeError):
    """
    The secret key is missing, not a string, or not base64/base64url.
    """


class InputShapeError(GoInstantAuthError, TypeError):
    """
    User data, extra headers or groups have the wrong type.
    """


class MissingClaimError(GoInstantAuthError, ValueError):
    """
    A required key is absent (or `None`) in the user data or in one group.
    """

    def __init__(self, key: str, *, group_index: int | None = None) -> None:
        self.key = key
        self.group_index = group_index
        if group_index is None:
            prefix = "missing required key"
        else:
            prefix = f"group {group_index} missing required key"
        super().__init__(f"{prefix}: {key}")


# --- Module Notes -----------------------------------------------------------
# Digest failures from the HMAC primitive are not wrapped; they reach the
# caller unchanged.
