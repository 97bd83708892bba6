"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone

import logfire

# Settings are read from the environment when containers are built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ADMIN__USER", "admin")
os.environ.setdefault("ADMIN__PASSWORD", "s3cret")
os.environ.setdefault("CAPTCHA__ENABLED", "false")

logfire.configure(send_to_logfire=False, console=False)

ADMIN_AUTH = (os.environ["ADMIN__USER"], os.environ["ADMIN__PASSWORD"])


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    """Build a UTC timestamp on a fixed test day."""
    return datetime(2024, 5, 1, hour, minute, second, tzinfo=timezone.utc)
