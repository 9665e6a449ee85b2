"""Shared fixtures for compact-uuid tests."""

import uuid

import pytest

SAMPLE_UUID = uuid.UUID("123e4567-e89b-12d3-a456-426614174000")


@pytest.fixture
def sample_uuid():
    return SAMPLE_UUID


@pytest.fixture
def random_uuids():
    return [uuid.uuid4() for _ in range(200)]
