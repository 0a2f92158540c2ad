"""
Shared pytest fixtures for the career path test suite.
All fixtures use mock mode or a fake OpenAI client — no network required.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_src_dir   = os.path.join(_tests_dir, "..", "src")
for _p in (_tests_dir, _src_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

# Force mock mode — never call the generation service during tests
os.environ["FORCE_MOCK_MODE"] = "true"
os.environ["MOCK_DELAY_SECONDS"] = "0"
os.environ.setdefault("OPENAI_API_KEY", "<placeholder>")


import pytest

from factories import make_fake_client, make_settings, make_steps_json

from career_path.path_generator import LivePathGenerator, MockPathGenerator
from career_path.session import PathSession


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def mock_generator(sleep_calls):
    return MockPathGenerator(delay_seconds=1.5, sleep=sleep_calls.append)


@pytest.fixture
def live_settings():
    return make_settings(api_key="sk-test-abc123")


@pytest.fixture
def fake_client():
    return make_fake_client(make_steps_json())


@pytest.fixture
def live_generator(fake_client):
    return LivePathGenerator(fake_client, model="gpt-4o-mini", temperature=0.7)


@pytest.fixture
def session():
    return PathSession()
