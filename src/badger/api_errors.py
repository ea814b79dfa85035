"""Translate operator input errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from .exceptions import InvalidOperatorInput, PresetNotFoundError


def operator_error(exc: InvalidOperatorInput) -> HTTPException:
    if isinstance(exc, PresetNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"status": "error", "reason": "preset_not_found", "details": str(exc)},
        )
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"status": "error", "reason": "invalid_request", "details": str(exc)},
    )
