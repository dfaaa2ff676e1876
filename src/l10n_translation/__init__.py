# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Gettext translation entries and their merge rules."""

from l10n_translation.translation import Reference, Translation, merge

__version__ = "0.1.0"

__all__ = ["Reference", "Translation", "merge"]
