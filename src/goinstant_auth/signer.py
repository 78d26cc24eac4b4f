"""
goinstant_auth.signer

HS256 token signer.

Responsibilities:
- Validate and decode the shared secret key once, at construction.
- Turn user data (+ optional extra JOSE headers) into a signed compact token.
- Offer a blocking `sign_sync` and an awaitable `sign` with identical output.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from jwt.algorithms import HMACAlgorithm

from goinstant_auth.claims import DEFAULT_CLAIM_TABLES, ClaimTables, serialize
from goinstant_auth.codec import decode_to_bytes, encode_bytes, is_base64url, to_base64url
from goinstant_auth.errors import GoInstantAuthError, SecretKeyError
from goinstant_auth.observability.logging import get_logger
from goinstant_auth.settings import Settings, get_settings

log = get_logger(__name__)

SignCallback = Callable[[BaseException | None, str | None], Any]


def _decode_secret_key(secret_key: Any) -> bytes:
    if not secret_key or not isinstance(secret_key, str):
        raise SecretKeyError("Secret Key must be a string")

    # Both base64url and standard base64 are accepted.
    normalized = to_base64url(secret_key)
    if not normalized or not is_base64url(normalized):
        raise SecretKeyError("Secret Key must be a base64url or base64")
    try:
        return decode_to_bytes(normalized)
    except ValueError as e:
        raise SecretKeyError("Secret Key must be a base64url or base64") from e


class Signer:
    """
    Issues tokens for one shared secret key.

    The decoded key is private and never changes, so one instance can be
    shared freely between callers and tasks.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        tables: ClaimTables = DEFAULT_CLAIM_TABLES,
        defer_digest: bool = True,
    ) -> None:
        self._binary_key = _decode_secret_key(secret_key)
        self._tables = tables
        self._defer_digest = defer_digest
        self._algorithm = HMACAlgorithm(HMACAlgorithm.SHA256)
        log.debug("signer_created", key_bytes=len(self._binary_key))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Signer:
        settings = settings or get_settings()
        tables = replace(DEFAULT_CLAIM_TABLES, audience=settings.audience)
        return cls(settings.secret_key, tables=tables, defer_digest=settings.defer_digest)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(audience={self._tables.audience!r})"

    def _signing_input(self, user_data: Any, extra_headers: Mapping[str, Any] | None) -> str:
        try:
            return serialize(user_data, extra_headers, tables=self._tables)
        except GoInstantAuthError as e:
            log.warning("sign_rejected", error=type(e).__name__, reason=str(e))
            raise

    def _finish(self, signing_input: str) -> str:
        signature = self._algorithm.sign(signing_input.encode("ascii"), self._binary_key)
        return f"{signing_input}.{encode_bytes(signature)}"

    def sign_sync(self, user_data: Any, extra_headers: Mapping[str, Any] | None = None) -> str:
        """
        Build and sign a token, raising on invalid input.
        """
        token = self._finish(self._signing_input(user_data, extra_headers))
        log.info("token_signed", sub=_subject(user_data), groups=_group_count(user_data), mode="sync")
        return token

    async def sign(
        self,
        user_data: Any,
        extra_headers: Mapping[str, Any] | SignCallback | None = None,
        callback: SignCallback | None = None,
    ) -> str | None:
        """
        Awaitable form of `sign_sync`; produces the same token.

        Without a callback the token is returned and errors are raised. With a
        callback (which may also be passed in the `extra_headers` position),
        it is called exactly once as `callback(error, None)` or
        `callback(None, token)` and this coroutine returns `None`.

        Calling `sign(...)` only creates the coroutine: nothing is validated,
        signed or reported (not even a non-callable callback) until it is
        awaited or scheduled, e.g. with `asyncio.create_task`.
        """
        if callable(extra_headers):
            callback, extra_headers = extra_headers, None
        if callback is not None and not callable(callback):
            raise TypeError("callback must be callable")

        try:
            token = await self._sign_async(user_data, extra_headers)
        except Exception as e:
            if callback is None:
                raise
            callback(e, None)
            return None

        if callback is None:
            return token
        callback(None, token)
        return None

    async def _sign_async(self, user_data: Any, extra_headers: Mapping[str, Any] | None) -> str:
        # Validation runs before the first suspension point.
        signing_input = self._signing_input(user_data, extra_headers)
        if self._defer_digest:
            await asyncio.sleep(0)
        token = self._finish(signing_input)
        log.info("token_signed", sub=_subject(user_data), groups=_group_count(user_data), mode="async")
        return token


def _subject(user_data: Any) -> Any:
    if isinstance(user_data, Mapping):
        return user_data.get("id")
    return getattr(user_data, "id", None)


def _group_count(user_data: Any) -> int:
    if isinstance(user_data, Mapping):
        groups = user_data.get("groups")
    else:
        groups = getattr(user_data, "groups", None)
    return len(groups) if groups else 0


# --- Module Notes -----------------------------------------------------------
# `defer_digest` keeps the async path from computing the digest in the same
# loop iteration as validation; disabling it does not change any token.
