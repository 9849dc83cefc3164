"""Generative service (upstream) connection settings."""

import os


UPSTREAM_URL = (os.getenv("UPSTREAM_URL", "http://127.0.0.1:18789") or "").rstrip("/")
UPSTREAM_PATH = os.getenv("UPSTREAM_PATH", "/v1/chat/completions")
UPSTREAM_TOKEN = os.getenv("UPSTREAM_TOKEN", "")
UPSTREAM_MODEL = os.getenv("UPSTREAM_MODEL", "clawdbot")

UPSTREAM_CONNECT_TIMEOUT_S = float(os.getenv("UPSTREAM_CONNECT_TIMEOUT_S", "10"))
UPSTREAM_READ_TIMEOUT_S = float(os.getenv("UPSTREAM_READ_TIMEOUT_S", "120"))


__all__ = [
    "UPSTREAM_URL",
    "UPSTREAM_PATH",
    "UPSTREAM_TOKEN",
    "UPSTREAM_MODEL",
    "UPSTREAM_CONNECT_TIMEOUT_S",
    "UPSTREAM_READ_TIMEOUT_S",
]
