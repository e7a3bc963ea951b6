# viralcarrot/core/errors.py
# Input errors -> 400, unexpected errors -> 500 (detail only in development)

from __future__ import annotations
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from viralcarrot.core.config import settings


class RecipeInputError(ValueError):
    # missing/empty required input (main food, pantry ingredients)
    pass


def failure_response(status_code: int, message: str, exc: Optional[BaseException] = None) -> JSONResponse:
    body: Dict[str, Any] = {"success": False, "error": message}
    if exc is not None and settings.is_development:
        body["details"] = str(exc)
    return JSONResponse(status_code=status_code, content=body)


async def recipe_input_error_handler(request: Request, exc: RecipeInputError) -> JSONResponse:
    return failure_response(400, str(exc))
