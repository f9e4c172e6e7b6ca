"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Make the project root and the fixtures package importable
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from arabizi.rules import Configuration, Rule
from arabizi.config import save_config
from fixtures.sample_settings import (
    DIGRAPH_RULES,
    REVERSED_DIGRAPH_RULES,
    SAMPLE_CHAT,
    SAMPLE_SETTINGS_JSON,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def default_config():
    """The built-in configuration."""
    return Configuration()


@pytest.fixture
def ordered_config():
    """Digraph listed before its single-letter prefix, ordered mode."""
    return Configuration(apply_rules_in_order=True, rules=DIGRAPH_RULES)


@pytest.fixture
def length_priority_config():
    """Single letter listed first, length-priority mode."""
    return Configuration(apply_rules_in_order=False, rules=REVERSED_DIGRAPH_RULES)


@pytest.fixture
def make_config():
    """Factory for ordered-mode configurations from (from, to) pairs."""
    def _make(*pairs, in_order=True):
        rules = [pair if isinstance(pair, Rule) else Rule(*pair) for pair in pairs]
        return Configuration(apply_rules_in_order=in_order, rules=rules)
    return _make


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def settings_file(tmp_path):
    """A settings file in the stored JSON format."""
    file_path = tmp_path / "settings.json"
    file_path.write_text(SAMPLE_SETTINGS_JSON, encoding="utf-8")
    return file_path


@pytest.fixture
def default_settings_file(tmp_path):
    """A settings file holding the built-in configuration."""
    return save_config(Configuration(), tmp_path / "defaults.json")


@pytest.fixture
def chat_file(tmp_path):
    """A text file mixing Arabizi, punctuation and Arabic."""
    file_path = tmp_path / "chat.txt"
    file_path.write_text(SAMPLE_CHAT, encoding="utf-8")
    return file_path
