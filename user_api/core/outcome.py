"""Outcome — explicit success/failure value returned by request handlers.

Invariants:
    - A handler returns exactly one Outcome per request (Success XOR Failure)
    - Failure always carries an ApiError; Success carries a payload or None
    - Collapsed into an HTTP response at a single boundary (api.responses.render)

Design Decisions:
    - Frozen dataclasses over exceptions-as-control-flow: every fault path is
      visible in the handler's return type (ADR: single terminal translator)
"""

from dataclasses import dataclass
from typing import Any, Union

from user_api.core.errors import ApiError


@dataclass(frozen=True)
class Success:
    """Handler completed; payload is rendered with status_code."""
    payload: Any
    status_code: int = 200


@dataclass(frozen=True)
class Failure:
    """Handler failed; error is handed to the error translator."""
    error: ApiError


Outcome = Union[Success, Failure]
