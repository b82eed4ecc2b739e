"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from mdlinks.catalog.loader import load_catalog_from_string


@pytest.fixture
def sample_catalog_yaml():
    """Provide a sample catalog YAML for testing."""
    return """
version: 1
locale: en
fallback_locale: en
messages:
  en:
    help.search: "Search the [repository](https://example.org/repo) or browse [collections](/collections)."
    help.plain: "Enter a title (required)."
    help.only_en: "Only available in English."
  de:
    help.search: "Durchsuchen Sie das [Repository](https://example.org/repo)."
    help.plain: "Titel eingeben (erforderlich)."
"""


@pytest.fixture
def sample_catalog(sample_catalog_yaml):
    """Provide a loaded catalog object for testing."""
    return load_catalog_from_string(sample_catalog_yaml)


@pytest.fixture
def temp_catalog_file(sample_catalog_yaml):
    """Provide a temporary catalog file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_catalog_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters."""
    
    def __init__(self):
        self.counters = {}
        self.observations = []
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures counters."""
    return SimpleTestMeter()
