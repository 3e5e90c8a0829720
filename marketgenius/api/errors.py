"""HTTP error helpers shared by the route modules.

Every error response carries ``detail = {"error": ..., "message": ...}``.
"""
from __future__ import annotations

from fastapi import HTTPException, status

from marketgenius.services.errors import GenerationError


def http_error(status_code: int, error: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": error, "message": message})


def not_found(what: str, identifier: object) -> HTTPException:
    return http_error(status.HTTP_404_NOT_FOUND, "Not found", f"{what} {identifier} not found")


def conflict(message: str) -> HTTPException:
    return http_error(status.HTTP_409_CONFLICT, "Conflict", message)


def unprocessable(message: str) -> HTTPException:
    return http_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", message)


def generation_failed(exc: GenerationError) -> HTTPException:
    return http_error(status.HTTP_502_BAD_GATEWAY, "Generation failed", exc.message)
