"""CLI package.

The ``cli`` sub-package contains the Click application and the
interactive menu shell.  It works through the sub-package APIs
(``marina.registry``, ``marina.billing``, ...) and the session wrapper,
never through private helpers.
"""
from __future__ import annotations
