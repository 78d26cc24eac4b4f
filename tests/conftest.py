"""
tests.conftest

Shared fixtures for signer tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from goinstant_auth import Signer
from goinstant_auth.settings import get_settings

SECRET_KEY = "HKYdFdnezle2yrI2_Ph3cHz144bISk-cvuAbeAAA999"


@pytest.fixture
def signer() -> Signer:
    return Signer(SECRET_KEY)


@pytest.fixture
def user_data() -> dict[str, Any]:
    return {
        "id": "bar",
        "domain": "example.com",
        "displayName": "bob",
    }


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    get_settings.cache_clear()
