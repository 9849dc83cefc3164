"""Test suite for chatgate.

Unit tests live under ``unit/`` grouped by layer (routing, limits, streaming,
execution, errors, server, telemetry) and are collected by the root
``conftest.py``.
"""
