"""Admission control (sliding-window rate limit) configuration."""

import os


# Requests admitted per key inside one trailing window
RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "10"))
RATE_LIMIT_WINDOW_MS = int(os.getenv("RATE_LIMIT_WINDOW_MS", "1000"))

# Background sweep that drops keys whose whole window expired
RATE_LIMIT_SWEEP_INTERVAL_S = float(os.getenv("RATE_LIMIT_SWEEP_INTERVAL_S", "60"))

# Hard cap on tracked keys; oldest-inserted keys are evicted first
RATE_LIMIT_MAX_KEYS = int(os.getenv("RATE_LIMIT_MAX_KEYS", "10000"))


__all__ = [
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_WINDOW_MS",
    "RATE_LIMIT_SWEEP_INTERVAL_S",
    "RATE_LIMIT_MAX_KEYS",
]
