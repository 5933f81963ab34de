from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator

import pytest


def pytest_configure(config: pytest.Config) -> None:
    with contextlib.suppress(AttributeError):
        config.option.no_cov = True


@pytest.fixture(autouse=True, scope="session")
def _quiet_reader() -> Iterator[None]:
    """Keep the reader's DEBUG failure records out of timed sections."""
    reader = logging.getLogger("sexp")
    level = reader.level
    reader.setLevel(logging.WARNING)
    yield
    reader.setLevel(level)
