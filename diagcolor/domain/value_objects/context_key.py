"""Identifiers for values carried through request-scoped context."""

from contextvars import ContextVar
from enum import Enum
from typing import Any


class ContextKey(str, Enum):
    ERR_GROUP = "errGroup"
    CLIENT_CONNECTION_ID = "clientConnectionId"
    DEST_CONNECTION_ID = "destConnectionId"


CONTEXT_VARS: dict[ContextKey, ContextVar[Any]] = {
    key: ContextVar(key.value, default=None) for key in ContextKey
}


def context_var(key: ContextKey) -> ContextVar[Any]:
    return CONTEXT_VARS[key]
