"""Shared constants for the record/replay tooling."""

import re
from datetime import datetime, timezone

# Patterns for the kinds of dependency a recorded mock belongs to
NO_SQL_DB = "NO_SQL_DB"
SQL_DB = "SQL_DB"
GRPC = "GRPC"
HTTP_CLIENT = "HTTP_CLIENT"
HTTP2_CLIENT = "HTTP2_CLIENT"
TEST_SET_PATTERN = "test-set-"
STRING = "string"
TEST_RUN_TEMPLATE_NAME = "test-run-"

DEFAULT_INCOMING_PROXY_PORT = 36789

PASS_THROUGH_HOSTS: list[str] = [r"^dc\.services\.visualstudio\.com$"]

BASE_TIME = datetime(2000, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def is_pass_through_host(host: str, patterns: list[str] | None = None) -> bool:
    """Return True if traffic to host should bypass recording."""
    candidates = PASS_THROUGH_HOSTS if patterns is None else patterns
    return any(re.search(pattern, host) for pattern in candidates)
