"""Pytest configuration and fixtures."""
# 3rd party
import pytest

# local
import grapheme_width


@pytest.fixture(autouse=True)
def _reset_default_cache():
    """Each test starts with an empty process-wide cache at the default ceiling."""
    grapheme_width.clear_cache()
    yield
    grapheme_width.set_max_cache_size(grapheme_width.DEFAULT_MAX_CACHE_SIZE)
    grapheme_width.clear_cache()


@pytest.fixture
def cache():
    """A private cache, isolated from the process-wide one."""
    return grapheme_width.WidthCache()
