from collections.abc import Generator

import pytest

from charset_transcoder.registry import clear_registry_cache


@pytest.fixture(autouse=True)
def fresh_registry() -> Generator[None, None, None]:
    """Start every test from an empty registry cache."""
    clear_registry_cache()
    yield
    clear_registry_cache()
