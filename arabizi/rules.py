"""
Rule and configuration data structures for the transliteration engine.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Any, Optional

logger = logging.getLogger(__name__)


class InvalidPatternError(ValueError):
    """Raised when a regex rule does not form a valid pattern."""

    def __init__(self, message: str, rule: Optional["Rule"] = None):
        super().__init__(message)
        self.rule = rule


# Flag letters as written in stored rule files (JavaScript RegExp style).
# "g" is handled separately: it selects replace-all over replace-first.
REGEX_FLAGS = {
    "g": 0,
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "d": 0,
}

# Replacement references in the JavaScript style, which re.sub inserts literally
JS_REFERENCE = re.compile(r"\$(?:\d|&|<\w+>)")


@dataclass(frozen=True)
class Rule:
    """
    A single from -> to substitution.

    Literal rules match ``source`` case-insensitively and insert ``target``
    verbatim. Regex rules compile ``source`` with ``flags`` and may use
    backreferences (``\\1``, ``\\g<name>``) in ``target``.
    """
    source: str  # "from" in rule files
    target: str  # "to" in rule files
    is_regex: bool = False
    flags: str = "g"

    def __post_init__(self):
        if not isinstance(self.source, str):
            raise TypeError(f"Rule source must be a string, got {type(self.source).__name__}")
        if not isinstance(self.target, str):
            raise TypeError(f"Rule target must be a string, got {type(self.target).__name__}")
        if not isinstance(self.is_regex, bool):
            raise TypeError(f"Rule is_regex must be a bool, got {type(self.is_regex).__name__}")
        if not isinstance(self.flags, str):
            raise TypeError(f"Rule flags must be a string, got {type(self.flags).__name__}")

    @property
    def is_global(self) -> bool:
        """Literal rules always replace every match; regex rules only with "g"."""
        return not self.is_regex or "g" in self.flags

    def compile(self) -> re.Pattern:
        """
        Compile the rule into a pattern.

        Returns:
            The compiled pattern (cached across calls).

        Raises:
            InvalidPatternError: If a regex rule's pattern or flags are invalid.
        """
        try:
            return _compile(self.source, self.is_regex, self.flags)
        except re.error as e:
            raise InvalidPatternError(f"Invalid pattern {self.source!r}: {e}", rule=self) from e
        except InvalidPatternError as e:
            raise InvalidPatternError(str(e), rule=self) from e

    def validate(self) -> None:
        """Check that the pattern compiles and the replacement template is usable."""
        pattern = self.compile()
        if self.is_regex:
            try:
                pattern.sub(self.target, "")
            except (re.error, IndexError) as e:
                raise InvalidPatternError(
                    f"Invalid replacement {self.target!r} for {self.source!r}: {e}", rule=self
                ) from e
            if JS_REFERENCE.search(self.target):
                logger.warning(
                    "Rule %r -> %r uses a $ reference; write \\1 or \\g<name> instead",
                    self.source, self.target,
                )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rule":
        """Build a rule from its stored form ``{from, to, isRegex?, flags?}``."""
        return cls(
            source=data["from"],
            target=data["to"],
            is_regex=data.get("isRegex", False),
            flags=data.get("flags", "g"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the stored form, omitting fields that hold their defaults."""
        data: dict[str, Any] = {"from": self.source, "to": self.target}
        if self.is_regex:
            data["isRegex"] = True
        if self.flags != "g":
            data["flags"] = self.flags
        return data


@lru_cache(maxsize=1024)
def _compile(source: str, is_regex: bool, flags: str) -> re.Pattern:
    # ASCII-only classes and case folding, as in the stored rule dialect
    if not is_regex:
        return re.compile(re.escape(source), re.IGNORECASE | re.ASCII)
    return re.compile(source, parse_flags(flags) | re.ASCII)


def parse_flags(flags: str) -> int:
    """
    Translate a flag string such as ``"gi"`` into ``re`` flags.

    Raises:
        InvalidPatternError: On an unknown or repeated flag letter.
    """
    value = 0
    seen = set()
    for letter in flags:
        if letter not in REGEX_FLAGS:
            raise InvalidPatternError(f"Unsupported regex flag {letter!r} in {flags!r}")
        if letter in seen:
            raise InvalidPatternError(f"Repeated regex flag {letter!r} in {flags!r}")
        seen.add(letter)
        value |= REGEX_FLAGS[letter]
    return value


DEFAULT_RULES: tuple[Rule, ...] = (
    # digraphs
    Rule("sh", "ش"),
    Rule("ch", "ش"),
    Rule("kh", "خ"),
    Rule("gh", "غ"),
    Rule("th", "ث"),
    Rule("dh", "ذ"),
    # arabizi digits
    Rule("3", "ع"),
    Rule("7", "ح"),
    Rule("9", "ق"),
    Rule("2", "ء"),
    Rule("5", "خ"),
    # single letters
    Rule("a", "ا"),
    Rule("b", "ب"),
    Rule("t", "ت"),
    Rule("j", "ج"),
    Rule("h", "ه"),
    Rule("d", "د"),
    Rule("r", "ر"),
    Rule("z", "ز"),
    Rule("s", "س"),
    Rule("f", "ف"),
    Rule("q", "ق"),
    Rule("k", "ك"),
    Rule("l", "ل"),
    Rule("m", "م"),
    Rule("n", "ن"),
    Rule("w", "و"),
    Rule("y", "ي"),
    Rule("g", "غ"),
    Rule("p", "ب"),
    Rule("v", "ف"),
)


@dataclass(frozen=True)
class Configuration:
    """
    Engine settings: feature toggles plus the ordered rule list.

    The engine only reads a configuration. Changes produce a new instance
    via :meth:`replace`.
    """
    enabled: bool = True
    convert_on_space: bool = True
    apply_rules_in_order: bool = True  # False: longest "from" first
    rules: tuple[Rule, ...] = field(default=DEFAULT_RULES)

    def __post_init__(self):
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))
        for rule in self.rules:
            if not isinstance(rule, Rule):
                raise TypeError(f"Expected Rule, got {type(rule).__name__}")

    def replace(self, **changes) -> "Configuration":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Configuration":
        """Build a configuration from a fully populated stored document."""
        return cls(
            enabled=data["enabled"],
            convert_on_space=data["convertOnSpace"],
            apply_rules_in_order=data["applyRulesInOrder"],
            rules=tuple(Rule.from_dict(r) for r in data["rules"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "convertOnSpace": self.convert_on_space,
            "applyRulesInOrder": self.apply_rules_in_order,
            "rules": [rule.to_dict() for rule in self.rules],
        }
