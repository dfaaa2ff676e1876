#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Translation entry data model."""

import logging
from dataclasses import dataclass

from l10n_translation import settings as _settings

log = logging.getLogger(__name__)


def _text(value):
    """Coerce any value to a string. None becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _index(value):
    """Coerce a plural index to int, or None if it can't be."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _unique(items):
    return list(dict.fromkeys(items))


@dataclass(frozen=True)
class Reference:
    """A source location where a message occurs."""
    filename: str
    line: "int | str | None" = None

    @property
    def key(self):
        line = "" if self.line is None else self.line
        return f"{self.filename}:{line}"


class Translation:
    """A single translatable message and its translations.

    An entry is identified by its (context, original, plural) triple.
    Empty strings mean "not set" for every text field.
    """

    def __init__(self, context="", original="", plural=""):
        self.context = context
        self.original = original
        self.plural = plural
        self.translation = ""
        self._plural_translations = {}
        self._references = {}
        self._comments = []
        self._extracted_comments = []
        self._flags = []

    def __repr__(self):
        return (f"Translation(context={self._context!r}, "
                f"original={self._original!r}, plural={self._plural!r})")

    @property
    def key(self):
        return (self._context, self._original, self._plural)

    def matches(self, context, original="", plural=""):
        """Check whether this entry has exactly the given identity."""
        return (self._context == context and self._original == original
                and self._plural == plural)

    # Text fields

    @property
    def context(self):
        return self._context

    @context.setter
    def context(self, value):
        self._context = _text(value)

    def has_context(self):
        return self._context != ""

    @property
    def original(self):
        return self._original

    @original.setter
    def original(self, value):
        self._original = _text(value)

    def has_original(self):
        return self._original != ""

    @property
    def translation(self):
        return self._translation

    @translation.setter
    def translation(self, value):
        self._translation = _text(value)

    def has_translation(self):
        return self._translation != ""

    @property
    def plural(self):
        return self._plural

    @plural.setter
    def plural(self, value):
        self._plural = _text(value)

    def has_plural(self):
        return self._plural != ""

    # Plural translations

    def set_plural_translation(self, value, index=None):
        """Set a plural translation.

        Without an index the value goes to the slot numbered by the
        current table size. Gaps left by explicit indices are not filled,
        so appending to {0: "a", 2: "c"} overwrites index 2.
        """
        index = _index(index)
        if index is None:
            index = len(self._plural_translations)
        self._plural_translations[index] = _text(value)

    def get_plural_translation(self, index=None):
        """Return one plural translation, or a copy of the whole table.

        A missing or invalid index gives an empty string.
        """
        if index is None:
            return dict(self._plural_translations)
        return self._plural_translations.get(_index(index), "")

    def has_plural_translation(self):
        # Plural forms are expected to start at 0.
        return 0 in self._plural_translations

    # References

    def add_reference(self, filename, line=None):
        ref = Reference(_text(filename), line)
        self._references[ref.key] = ref

    def get_references(self):
        return list(self._references.values())

    def has_references(self):
        return bool(self._references)

    def wipe_references(self):
        self._references = {}

    # Comments and flags

    def add_comment(self, comment):
        self._comments.append(_text(comment))

    def get_comments(self):
        return list(self._comments)

    def has_comments(self):
        return bool(self._comments)

    def add_extracted_comment(self, comment):
        self._extracted_comments.append(_text(comment))

    def get_extracted_comments(self):
        return list(self._extracted_comments)

    def has_extracted_comments(self):
        return bool(self._extracted_comments)

    def add_flag(self, flag):
        self._flags.append(_text(flag))

    def get_flags(self):
        return list(self._flags)

    def has_flags(self):
        return bool(self._flags)

    # Merging

    def merge_with(self, other, merge_references=True, merge_comments=True):
        """Merge another entry for the same message into this one.

        Existing translations are kept. Plural translations are taken
        from the other entry as a whole, and only when this entry has
        none. Comments, extracted comments and flags from the other entry
        come first in the result, without duplicates.
        """
        if not self.has_translation() and other.has_translation():
            self.translation = other.translation
            log.debug("%r: translation taken from merged entry", self)

        if not self.has_plural_translation() and other.has_plural_translation():
            self._plural_translations = other.get_plural_translation()
            log.debug("%r: plural translations taken from merged entry", self)

        if merge_references:
            for ref in other.get_references():
                self.add_reference(ref.filename, ref.line)

        if merge_comments:
            self._comments = _unique(other.get_comments() + self._comments)
            self._extracted_comments = _unique(
                other.get_extracted_comments() + self._extracted_comments)
            self._flags = _unique(other.get_flags() + self._flags)

    # Plain data

    def to_dict(self):
        return {
            "context": self._context,
            "original": self._original,
            "plural": self._plural,
            "translation": self._translation,
            "plural_translations": self.get_plural_translation(),
            "references": [[r.filename, r.line] for r in self.get_references()],
            "comments": self.get_comments(),
            "extracted_comments": self.get_extracted_comments(),
            "flags": self.get_flags(),
        }

    @classmethod
    def from_dict(cls, data):
        """Build an entry from the output of to_dict() or parsed JSON."""
        entry = cls(data.get("context"), data.get("original"),
                    data.get("plural"))
        entry.translation = data.get("translation")
        for index, value in (data.get("plural_translations") or {}).items():
            entry.set_plural_translation(value, index)
        for ref in data.get("references") or []:
            entry.add_reference(*ref)
        for comment in data.get("comments") or []:
            entry.add_comment(comment)
        for comment in data.get("extracted_comments") or []:
            entry.add_extracted_comment(comment)
        for flag in data.get("flags") or []:
            entry.add_flag(flag)
        return entry


def merge(target, source, settings=None):
    """Merge source into target using the user's merge settings.

    Returns target.
    """
    options = _settings.merge_options(settings)
    target.merge_with(source, options["references"], options["comments"])
    return target
