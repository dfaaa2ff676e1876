#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright 2026 Daniel Nylander <daniel@danielnylander.se>

"""Per-user settings stored under the XDG config directory."""

import json
import logging
import os

APP_NAME = "l10n-translation"

log = logging.getLogger(__name__)


def settings_path():
    xdg = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg, APP_NAME, "settings.json")


def load_settings():
    """Read the settings file. Returns {} if it is missing or unreadable."""
    p = settings_path()
    try:
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        log.warning("Ignoring settings file %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: not a JSON object", p)
        return {}
    return data


def save_settings(s):
    p = settings_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(s, f, indent=2)


def _switch(settings, name):
    value = settings.get(name, True)
    if not isinstance(value, bool):
        log.warning("Setting %s must be true or false, got %r; using true",
                    name, value)
        return True
    return value


def merge_options(settings=None):
    """Resolve the default merge switches.

    Both default to True. Reads the settings file when no settings are given.
    """
    if settings is None:
        settings = load_settings()
    return {
        "references": _switch(settings, "merge_references"),
        "comments": _switch(settings, "merge_comments"),
    }
