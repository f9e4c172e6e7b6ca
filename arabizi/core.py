"""
Transliteration Core Engine

Applies an ordered list of substitution rules to Latin-alphabet
("Arabizi") words and converts them to Arabic script. Text-level
conversion splits the input into word tokens and leaves everything
between them untouched.

Pure functions of (input, configuration); no state is kept between calls.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from .rules import Configuration, InvalidPatternError, Rule

logger = logging.getLogger(__name__)

CONVERTIBLE = re.compile(r"[A-Za-z0-9]")
WORD_TOKEN = re.compile(r"[A-Za-z0-9'_-]+")


def transliterate_word(word: str, config: Configuration) -> str:
    """
    Convert a single word using the configured rules.

    Words with no ASCII letter or digit (Arabic text, punctuation,
    symbols) are returned unchanged.

    Args:
        word: The word to convert.
        config: Rules and application mode.

    Returns:
        The converted word.
    """
    if not word or not CONVERTIBLE.search(word):
        return word

    out = word
    for rule in ordered_rules(config):
        out = apply_rule(rule, out)
    return out


# Name used by host integrations.
transliterate = transliterate_word


def transliterate_text(text: str, config: Configuration) -> str:
    """Convert every word token in ``text``, keeping separators in place."""
    return WORD_TOKEN.sub(lambda m: transliterate_word(m.group(0), config), text)


def ordered_rules(config: Configuration) -> Iterable[Rule]:
    """
    Return the rules in application order.

    In length-priority mode the rules are sorted by descending ``source``
    length; ``sorted`` is stable, so equal lengths keep list order.
    """
    if config.apply_rules_in_order:
        return config.rules
    return sorted(config.rules, key=lambda rule: len(rule.source), reverse=True)


def apply_rule(rule: Rule, text: str) -> str:
    """
    Apply one rule to ``text``.

    A rule whose pattern cannot be compiled is skipped with a warning and
    ``text`` is returned as is.
    """
    if not rule.source:
        return text

    try:
        pattern = rule.compile()
        if rule.is_regex:
            return pattern.sub(rule.target, text, count=0 if rule.is_global else 1)
        target = rule.target
        return pattern.sub(lambda _match: target, text)
    except InvalidPatternError as e:
        logger.warning("Skipping rule %r -> %r: %s", rule.source, rule.target, e)
    except re.error as e:
        logger.warning("Skipping rule %r -> %r: invalid replacement: %s", rule.source, rule.target, e)
    return text


class Transliterator:
    """
    Engine bound to one configuration.

    Convenience wrapper used by the command line; the module-level
    functions are the primary API.
    """

    def __init__(self, config: Optional[Configuration] = None):
        self.config = config or Configuration()

    def convert_word(self, word: str) -> str:
        return transliterate_word(word, self.config)

    def convert_text(self, text: str) -> str:
        return transliterate_text(text, self.config)

    def convert_file(self, file_path: Path | str) -> str:
        """
        Read a UTF-8 text file and return its converted content.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

        content = path.read_text(encoding="utf-8", errors="replace")
        logger.debug("Converting %s (%d chars, %d rules)", path, len(content), len(self.config.rules))
        return self.convert_text(content)
