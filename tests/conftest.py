"""
Shared fixtures for the test suite.

Generators run on a source that always picks the first candidate, so every
challenge a fixture builds is predictable.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from eartrainer.app import app, get_session
from eartrainer.challenge_generator import ChallengeGenerator
from eartrainer.session import DrillSession


@pytest.fixture
def zero_source() -> Callable[[], float]:
    """Always picks the first candidate."""
    return lambda: 0.0


@pytest.fixture
def generator(zero_source) -> ChallengeGenerator:
    return ChallengeGenerator(random_source=zero_source)


@pytest.fixture
def session(generator) -> DrillSession:
    return DrillSession(generator=generator)


@pytest.fixture
def client(session):
    """TestClient bound to a fresh, deterministic drill session."""
    session.next_challenge()
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
