"""Circuit breaker defaults for upstream calls."""

import os


CIRCUIT_FAILURE_THRESHOLD = int(os.getenv("CIRCUIT_FAILURE_THRESHOLD", "5"))
CIRCUIT_RESET_TIMEOUT_S = float(os.getenv("CIRCUIT_RESET_TIMEOUT_S", "30"))

# Breaker key guarding the generative service
UPSTREAM_CIRCUIT_NAME = os.getenv("UPSTREAM_CIRCUIT_NAME", "upstream")


__all__ = [
    "CIRCUIT_FAILURE_THRESHOLD",
    "CIRCUIT_RESET_TIMEOUT_S",
    "UPSTREAM_CIRCUIT_NAME",
]
