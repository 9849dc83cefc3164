"""Centralized exception classes for the chat gateway.

This module re-exports all domain-specific exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - limits.py: Admission control errors with retry info
    - circuit.py: Open-circuit refusals
    - upstream.py: Non-2xx answers from the generative service
    - validation.py: Request validation errors with error codes
    - classify.py: Exception-to-telemetry label mapping
"""

from .limits import RateLimitError
from .classify import classify_error
from .circuit import CircuitOpenError
from .upstream import UpstreamError
from .validation import ValidationError

__all__ = [
    # Admission control
    "RateLimitError",
    # Resilience
    "CircuitOpenError",
    "UpstreamError",
    # Validation
    "ValidationError",
    # Classification
    "classify_error",
]
