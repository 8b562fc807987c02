"""Shared fixtures for Sahayak tests."""

import pytest

from sahayak.tests.fakes import PNG_DATA_URI, FakeGenerationClient


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def png_data_uri():
    return PNG_DATA_URI
