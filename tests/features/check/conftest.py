"""Fixtures providing empty in-memory PC, database and DAP stores."""

from __future__ import annotations

import pytest

from check_fakes import FakeDapLibrary, FakePcLibrary, FakeTrackRepository


@pytest.fixture
def pc() -> FakePcLibrary:
    return FakePcLibrary()


@pytest.fixture
def db() -> FakeTrackRepository:
    return FakeTrackRepository()


@pytest.fixture
def dap(pc: FakePcLibrary) -> FakeDapLibrary:
    return FakeDapLibrary(pc)
