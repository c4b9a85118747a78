"""Shared pytest configuration.

Environment defaults are set before ``crm_api`` is imported so the module-level
configuration never points at an on-disk database.
"""

import os

os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SIDE_EFFECTS_BACKEND", "noop")

from tests.fixtures import *  # noqa: E402,F401,F403
