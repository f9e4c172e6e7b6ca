"""
Editor integration helpers.

The host editor calls :func:`edit_for_insertion` after each change and
applies the returned :class:`Edit` itself. The host must also make sure
its own application of that edit does not trigger another conversion.
"""

from dataclasses import dataclass
from typing import Optional

from .core import transliterate_text, transliterate_word
from .locator import find_word_before
from .rules import Configuration


@dataclass(frozen=True)
class Edit:
    """Replace ``buffer[start:end]`` with ``text``."""
    start: int
    end: int
    text: str


def is_trigger(inserted: str) -> bool:
    """Conversion is triggered by inserting a space or a newline."""
    return " " in inserted or "\n" in inserted


def edit_for_insertion(buffer: str, cursor: int, inserted: str, config: Configuration) -> Optional[Edit]:
    """
    Work out the conversion edit for a just-applied insertion.

    Args:
        buffer: Buffer content after the insertion.
        cursor: Cursor offset after the insertion.
        inserted: The inserted text.
        config: Current settings.

    Returns:
        The edit to apply, or None if nothing should change.
    """
    if not config.enabled or not config.convert_on_space:
        return None
    if not is_trigger(inserted):
        return None

    span = find_word_before(buffer, cursor)
    if span is None:
        return None

    converted = transliterate_word(span.text, config)
    if converted == span.text:
        return None
    return Edit(start=span.start, end=span.end, text=converted)


def apply_edit(buffer: str, edit: Edit) -> str:
    return buffer[:edit.start] + edit.text + buffer[edit.end:]


def convert_selection(selection: str, config: Configuration) -> str:
    """
    Convert a selected block of text word by word.

    Raises:
        ValueError: If the selection is empty.
    """
    if not selection:
        raise ValueError("Select some text first.")
    return transliterate_text(selection, config)


def toggle_enabled(config: Configuration) -> Configuration:
    return config.replace(enabled=not config.enabled)


def status_text(config: Configuration) -> str:
    return "AR Transliteration: ON" if config.enabled else "AR Transliteration: OFF"
