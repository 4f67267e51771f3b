"""Error and outcome responses. Every error body is {"error": "..."}."""

from __future__ import annotations

from fastapi.responses import JSONResponse

from app.schemas.common import ErrorResponse, SaveResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def not_found(label: str) -> JSONResponse:
    return error_response(404, f"{label} not found")


def save_failed(noun: str, detail: str | None) -> JSONResponse:
    message = f"Failed to save {noun}"
    if detail:
        message = f"{message}: {detail}"
    return error_response(500, message)


def delete_outcome(label: str, noun: str, entity_id: int, deleted: bool, detail: str | None):
    """200 when the row was deleted, 500 when the store rejected it, 404 when it never existed."""
    if deleted:
        return SaveResponse(message=f"{label} deleted", id=entity_id)
    if detail:
        return error_response(500, f"Failed to delete {noun}: {detail}")
    return not_found(label)


ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
