# Test fixtures
from .sample_settings import (
    SAMPLE_SETTINGS,
    SAMPLE_SETTINGS_JSON,
    PARTIAL_SETTINGS,
    MALFORMED_RULE_LISTS,
    DIGRAPH_RULES,
    REVERSED_DIGRAPH_RULES,
    SAMPLE_CHAT,
)

__all__ = [
    "SAMPLE_SETTINGS",
    "SAMPLE_SETTINGS_JSON",
    "PARTIAL_SETTINGS",
    "MALFORMED_RULE_LISTS",
    "DIGRAPH_RULES",
    "REVERSED_DIGRAPH_RULES",
    "SAMPLE_CHAT",
]
