"""
Arabizi Transliterator - Rule-Driven Latin-to-Arabic Conversion

Converts Latin-alphabet Arabic ("Arabizi") into Arabic script by applying
an ordered, user-editable list of substitution rules to each word. Includes
the word lookup an editor needs to convert words as they are typed.
"""

from .config import ConfigError, load_config, parse_rules, save_config
from .core import transliterate, transliterate_text, transliterate_word
from .editor import Edit, edit_for_insertion
from .locator import WordSpan, find_word_before
from .rules import DEFAULT_RULES, Configuration, InvalidPatternError, Rule

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "ConfigError",
    "DEFAULT_RULES",
    "Edit",
    "InvalidPatternError",
    "Rule",
    "WordSpan",
    "edit_for_insertion",
    "find_word_before",
    "load_config",
    "parse_rules",
    "save_config",
    "transliterate",
    "transliterate_text",
    "transliterate_word",
]
