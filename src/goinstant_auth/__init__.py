"""
goinstant_auth

Issue HS256-signed identity tokens from a shared secret key.

Responsibilities:
- Expose package version metadata.
- Re-export the public signing API.
"""

from goinstant_auth.claims import DEFAULT_CLAIM_TABLES, ClaimTables
from goinstant_auth.errors import (
    GoInstantAuthError,
    InputShapeError,
    MissingClaimError,
    SecretKeyError,
)
from goinstant_auth.models import GroupClaim, UserIdentity
from goinstant_auth.signer import Signer

__all__ = [
    "DEFAULT_CLAIM_TABLES",
    "ClaimTables",
    "GoInstantAuthError",
    "GroupClaim",
    "InputShapeError",
    "MissingClaimError",
    "SecretKeyError",
    "Signer",
    "UserIdentity",
    "__version__",
]

__version__ = "1.0.0"
