"""
Typed errors raised by the service layer.

Every error carries an HTTP ``status_code`` and a machine-readable ``code``;
``inventory_api.main`` turns them into ``{"detail": message}`` responses.

    InventoryError
    +-- NotFoundError            404
    +-- AlreadyExistsError       400
    +-- InsufficientStockError   400
    +-- ValidationError          400
"""


class InventoryError(Exception):
    status_code = 400
    code = "INVENTORY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource


class AlreadyExistsError(InventoryError):
    code = "ALREADY_EXISTS"

    def __init__(self, resource: str, message: str | None = None):
        super().__init__(message or f"{resource} already exists")
        self.resource = resource


class InsufficientStockError(InventoryError):
    code = "INSUFFICIENT_STOCK"

    def __init__(self, available: int):
        super().__init__(f"Insufficient stock. Only {available} items available")
        self.available = available


class ValidationError(InventoryError):
    code = "VALIDATION_ERROR"


__all__ = [
    "AlreadyExistsError",
    "InsufficientStockError",
    "InventoryError",
    "NotFoundError",
    "ValidationError",
]
