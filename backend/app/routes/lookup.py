"""
MangoNote Backend - Lookup-and-Respond Helper
===============================================

What:  The one code path every "fetch X by identifier" endpoint goes through.
How:   Checks the identifier, awaits the service lookup, and turns the outcome
       into an envelope:

           blank identifier  -> 400 {success: false, error: <missing message>}
           lookup -> None    -> 404 {success: false, error: <not found message>}
           lookup -> entity  -> 200 {success: true, data: entity}
           lookup raises     -> ErrorHandler.log_error(context, {id_field: id})
                                500 ErrorHandler.create_error_response(error)

Who:   Note and mind map route handlers.

The 400 check runs before the lookup is awaited, so a blank identifier never
reaches the service.
"""

from typing import Any, Awaitable, Callable, Optional, Union

from fastapi.responses import JSONResponse

from app.error_handler import ErrorHandler
from app.schemas.common import ApiResponse

Lookup = Callable[[str], Awaitable[Optional[Any]]]


def client_error(status_code: int, message: str) -> JSONResponse:
    """Envelope for 4xx answers: `{"success": false, "error": message}`."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def server_error(error: BaseException, context: str, metadata: Optional[dict] = None) -> JSONResponse:
    """Log `error` under `context` and answer with the sanitized 500 envelope."""
    ErrorHandler.log_error(error, context, metadata)
    return JSONResponse(
        status_code=500,
        content=ErrorHandler.create_error_response(error),
    )


async def lookup_and_respond(
    entity_id: Optional[str],
    lookup: Lookup,
    *,
    context: str,
    id_field: str,
    missing_id_message: str,
    not_found_message: str,
) -> Union[ApiResponse, JSONResponse]:
    """
    Run a lookup for `entity_id` and build the response.

    Args:
        entity_id:          Identifier taken from the request path
        lookup:             Coroutine function `(entity_id) -> entity | None`
        context:            Failure context tag for logging, e.g. "note_fetch"
        id_field:           Metadata key the identifier is logged under
        missing_id_message: 400 error text
        not_found_message:  404 error text
    """
    if entity_id is None or not entity_id.strip():
        return client_error(400, missing_id_message)

    try:
        entity = await lookup(entity_id)
    except Exception as error:
        return server_error(error, context, {id_field: entity_id})

    if entity is None:
        return client_error(404, not_found_message)

    return ApiResponse(data=entity)
