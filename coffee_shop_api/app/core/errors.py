"""
Error taxonomy for the order and loyalty services and the handlers that
turn those errors into JSON responses.

Services raise the exceptions below without knowing anything about
HTTP.  ``register_exception_handlers`` installs one handler per error
type on the FastAPI application; each handler logs the failure and
renders the response body existing clients rely on (``{"errors": [...]}``
for field problems, ``{"message": ...}`` otherwise).
"""

import logging
from typing import Any, Dict, Iterable, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CoffeeShopError(Exception):
    """Base class for every error raised by the services."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(CoffeeShopError):
    """One or more payload fields are missing, mistyped or out of range.

    ``errors`` holds every violation found, not only the first one.
    """

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("Validation failed")
        self.errors = errors

    def to_content(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidItemsError(CoffeeShopError):
    """An order references menu item ids that are not in the catalog."""

    def __init__(self, invalid_items: List[str]) -> None:
        super().__init__("Invalid menu items")
        self.invalid_items = invalid_items

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message, "invalidItems": self.invalid_items}


class NotFoundError(CoffeeShopError):
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExistsError(CoffeeShopError):
    pass


class InvalidBalanceError(CoffeeShopError):
    """A loyalty balance below zero was supplied."""

    def __init__(self, message: str = "Balance cannot be negative") -> None:
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        return {"errors": [self.message]}


def format_error_entries(raw_errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic style errors into ``{"field", "message", "type"}`` entries."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())) or "body",
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in raw_errors
    ]


async def handle_coffee_shop_error(request: Request, exc: CoffeeShopError) -> JSONResponse:
    """Render a service error with its own status code and body."""
    logger.warning("%s at %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and query parameters in the same shape as
    payload validation failures instead of FastAPI's default 422."""
    errors = format_error_entries(exc.errors())
    logger.warning("Rejected request at %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


def register_exception_handlers(app) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(CoffeeShopError, handle_coffee_shop_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
