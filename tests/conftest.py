"""Shared pytest fixtures for the whole suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from lexpath.features.path.domain.encoding import DefaultCodecPolicy


@pytest.fixture(autouse=True)
def reset_default_codec() -> Iterator[None]:
    """Restore the process-wide codec after every test."""

    original = DefaultCodecPolicy._installed  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        DefaultCodecPolicy._installed = original  # pyright: ignore[reportPrivateUsage]
