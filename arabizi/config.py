"""
Loading, validating and saving transliteration settings.

Settings are stored as a JSON document::

    {
      "enabled": true,
      "convertOnSpace": true,
      "applyRulesInOrder": true,
      "rules": [{"from": "sh", "to": "ش"}, {"from": "(\\\\d)\\\\1", "to": "DOUBLE", "isRegex": true}]
    }

Everything read from disk or from the rules editor passes through here
before it reaches the engine.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .rules import DEFAULT_RULES, Configuration, InvalidPatternError, Rule

logger = logging.getLogger(__name__)

BOOL_KEYS = {
    "enabled": "enabled",
    "convertOnSpace": "convert_on_space",
    "applyRulesInOrder": "apply_rules_in_order",
}


class ConfigError(ValueError):
    """Raised when a settings document or rule list is malformed."""
    pass


def parse_rules(data: Any) -> tuple[Rule, ...]:
    """
    Validate a stored rule list and build rules from it.

    Args:
        data: Decoded JSON, expected to be a list of rule objects.

    Returns:
        The rules, in list order.

    Raises:
        ConfigError: If the list or any entry is malformed, or a regex
            rule does not compile.
    """
    if not isinstance(data, list):
        raise ConfigError("Rules must be an array.")

    rules = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict) or not isinstance(entry.get("from"), str) \
                or not isinstance(entry.get("to"), str):
            raise ConfigError("Each rule must have string fields: from, to.")
        if not isinstance(entry.get("isRegex", False), bool):
            raise ConfigError(f"Rule {index}: isRegex must be true or false.")
        if not isinstance(entry.get("flags", "g"), str):
            raise ConfigError(f"Rule {index}: flags must be a string.")

        rule = Rule.from_dict(entry)
        try:
            rule.validate()
        except InvalidPatternError as e:
            raise ConfigError(f"Rule {index}: {e}") from e
        rules.append(rule)

    return tuple(rules)


def parse_rules_json(text: str) -> tuple[Rule, ...]:
    """Parse rules from the JSON text of the rules editor."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e}") from e
    return parse_rules(data)


def dumps_rules(rules: tuple[Rule, ...]) -> str:
    """Render rules as the indented JSON shown in the rules editor."""
    return json.dumps([rule.to_dict() for rule in rules], ensure_ascii=False, indent=2)


def config_from_dict(data: Any) -> Configuration:
    """
    Build a configuration from a stored document.

    Keys present in ``data`` override the defaults; missing keys keep
    their default values and unknown keys are ignored.
    """
    if not isinstance(data, dict):
        raise ConfigError("Settings must be a JSON object.")

    changes: dict[str, Any] = {}
    for key, attr in BOOL_KEYS.items():
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false, got {data[key]!r}")
            changes[attr] = data[key]

    if "rules" in data:
        changes["rules"] = parse_rules(data["rules"])

    return Configuration().replace(**changes)


def load_config(path: Path | str) -> Configuration:
    """
    Load settings from a JSON file.

    A missing file yields the default configuration.

    Raises:
        ConfigError: If the file is not valid JSON or not a valid document.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No settings at %s, using defaults", path)
        return Configuration()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    config = config_from_dict(data)
    logger.debug("Loaded %d rules from %s", len(config.rules), path)
    return config


def save_config(config: Configuration, path: Path | str) -> Path:
    """Write settings as indented UTF-8 JSON and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.to_dict(), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    logger.debug("Saved %d rules to %s", len(config.rules), path)
    return path


def reset_rules(config: Configuration) -> Configuration:
    """Return a copy of ``config`` with the default rule list."""
    return config.replace(rules=DEFAULT_RULES)
