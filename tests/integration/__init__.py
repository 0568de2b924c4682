"""Integration tests.

Integration tests exercise the full load -> operate -> save stack
against real files in a temporary directory.  They are kept in a
separate directory so they can be excluded from the fast unit-test run
with ``pytest tests/unit/``.
"""
from __future__ import annotations
