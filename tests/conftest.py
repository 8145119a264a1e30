"""Shared test fixtures."""

import pytest

from pyisoduration import DurationParser


@pytest.fixture
def parser():
    return DurationParser()


@pytest.fixture
def short_parser():
    return DurationParser(max_length=8)
