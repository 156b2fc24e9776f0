# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc if part is not None) or "body"


def validation_context(exc: PydanticValidationError) -> dict[str, Any]:
    """Field names and error types only; submitted values never leave the service."""
    problems = [
        {"field": _field_path(error.get("loc", ())), "type": error.get("type", "value_error")}
        for error in exc.errors(include_input=False, include_url=False)
    ]
    return {
        "fields": sorted({problem["field"] for problem in problems}),
        "errors": problems,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=validation_context(exc)) from exc


__all__ = [
    "raise_validation_error",
    "validation_context",
]
