"""Shared pytest fixtures for the whole suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from turncue.platform.display import FixedScaleProvider, configure_scale_provider


@pytest.fixture
def fixed_scale() -> Iterator[FixedScaleProvider]:
    """Install a 2x process-wide display scale for the duration of a test."""

    provider = FixedScaleProvider(2.0)
    configure_scale_provider(provider)
    try:
        yield provider
    finally:
        configure_scale_provider(None)
