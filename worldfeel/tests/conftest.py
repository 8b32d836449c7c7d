import os
import sys

import pytest

# Add project root to path so the worldfeel package is importable without installing
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from dotenv import load_dotenv

# Load test environment variables from .env.test in the project root
dotenv_path = os.path.join(project_root, '.env.test')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path=dotenv_path)

from worldfeel.core.aggregation import AggregationEngine
from worldfeel.core.cache import ResultCache
from worldfeel.core.submission_coordinator import SubmissionCoordinator
from worldfeel.tests.stubs.memory_store import TEST_SECRET, FakeClock, MemorySubmissionStore


class MonotonicStub:
    """Float clock for ResultCache tests."""

    def __init__(self, value: float = 1000.0):
        self.value = value

    def __call__(self) -> float:
        return self.value

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def memory_store():
    return MemorySubmissionStore()

@pytest.fixture
def cache_clock():
    return MonotonicStub()

@pytest.fixture
def result_cache(cache_clock):
    return ResultCache(ttl_seconds=5.0, clock=cache_clock)

@pytest.fixture
def engine(memory_store, result_cache, clock):
    return AggregationEngine(memory_store, cache=result_cache, window_size=100, clock=clock)

@pytest.fixture
def coordinator(memory_store, engine, result_cache, clock):
    return SubmissionCoordinator(memory_store, engine, cache=result_cache, clock=clock, secret=TEST_SECRET)
