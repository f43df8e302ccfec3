"""Local configuration for syntree."""

from __future__ import annotations

import os


DEFAULT_AUTO_SUBSCRIPT = True
DEFAULT_ENCODING = "utf-8"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "syntree/0.1"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Subscript repeated phrase labels (NP, NP_1, ...) unless told otherwise.
SYNTREE_AUTO_SUBSCRIPT = _env_flag("SYNTREE_AUTO_SUBSCRIPT", DEFAULT_AUTO_SUBSCRIPT)
SYNTREE_ENCODING = os.getenv("SYNTREE_ENCODING", DEFAULT_ENCODING)
SYNTREE_FETCH_TIMEOUT_S = float(os.getenv("SYNTREE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
SYNTREE_FETCH_MAX_RETRIES = int(os.getenv("SYNTREE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
SYNTREE_FETCH_BACKOFF_S = float(os.getenv("SYNTREE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
SYNTREE_USER_AGENT = os.getenv("SYNTREE_USER_AGENT", DEFAULT_USER_AGENT)
