"""Response Rendering — collapses a handler Outcome into exactly one HTTP response."""

from fastapi import Response
from fastapi.responses import JSONResponse

from user_api.api.error_handlers import translate_error
from user_api.core.outcome import Failure, Outcome


def render(outcome: Outcome) -> Response:
    """Success → payload (or empty body), Failure → error translator."""
    if isinstance(outcome, Failure):
        return translate_error(outcome.error)
    if outcome.payload is None:
        return Response(status_code=outcome.status_code)
    return JSONResponse(
        status_code=outcome.status_code,
        content=outcome.payload.model_dump(mode="json", by_alias=True),
    )
