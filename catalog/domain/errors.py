# catalog/domain/errors.py
from enum import Enum


class RejectReason(str, Enum):
    """Reason codes for a rejected payload, one per validation check."""

    TITLE_REQUIRED = "TITLE_REQUIRED"
    TITLE_NOT_TEXT = "TITLE_NOT_TEXT"
    TITLE_EMPTY = "TITLE_EMPTY"
    TITLE_TOO_LONG = "TITLE_TOO_LONG"
    DESCRIPTION_NOT_TEXT = "DESCRIPTION_NOT_TEXT"
    DESCRIPTION_TOO_LONG = "DESCRIPTION_TOO_LONG"
    DETAILS_NOT_TEXT = "DETAILS_NOT_TEXT"
    DETAILS_TOO_LONG = "DETAILS_TOO_LONG"
    PRICE_INVALID = "PRICE_INVALID"
    ORIGINAL_PRICE_INVALID = "ORIGINAL_PRICE_INVALID"
    IMAGE_INVALID = "IMAGE_INVALID"
    CATEGORY_REQUIRED = "CATEGORY_REQUIRED"
    SIZES_NOT_LIST = "SIZES_NOT_LIST"
    BADGE_NOT_TEXT = "BADGE_NOT_TEXT"
    ID_TOO_LONG = "ID_TOO_LONG"
    ID_DUPLICATE = "ID_DUPLICATE"
    TITLE_DUPLICATE = "TITLE_DUPLICATE"
    IMAGE_DUPLICATE = "IMAGE_DUPLICATE"
    ITEMS_EMPTY = "ITEMS_EMPTY"
    TOTAL_INVALID = "TOTAL_INVALID"
    DATE_INVALID = "DATE_INVALID"


MESSAGES = {
    RejectReason.TITLE_REQUIRED: "El título del producto es obligatorio",
    RejectReason.TITLE_NOT_TEXT: "El título debe ser texto",
    RejectReason.TITLE_EMPTY: "El título no puede estar vacío",
    RejectReason.TITLE_TOO_LONG: "El título no puede exceder 100 caracteres",
    RejectReason.DESCRIPTION_NOT_TEXT: "La descripción debe ser texto",
    RejectReason.DESCRIPTION_TOO_LONG: "La descripción no puede exceder 500 caracteres",
    RejectReason.DETAILS_NOT_TEXT: "Los detalles deben ser texto",
    RejectReason.DETAILS_TOO_LONG: "Los detalles no pueden exceder 300 caracteres",
    RejectReason.PRICE_INVALID: "El precio debe ser un número positivo",
    RejectReason.ORIGINAL_PRICE_INVALID: "El precio original debe ser positivo",
    RejectReason.IMAGE_INVALID: "La URL de imagen no es válida",
    RejectReason.CATEGORY_REQUIRED: "La categoría es obligatoria",
    RejectReason.SIZES_NOT_LIST: "sizes debe ser un arreglo",
    RejectReason.BADGE_NOT_TEXT: "El badge debe ser texto",
    RejectReason.ID_TOO_LONG: "El ID no puede exceder 64 caracteres",
    RejectReason.ID_DUPLICATE: "El ID ya existe",
    RejectReason.TITLE_DUPLICATE: "Ya existe un producto con este título",
    RejectReason.IMAGE_DUPLICATE: "Ya existe un producto con esta imagen",
    RejectReason.ITEMS_EMPTY: "El carrito está vacío",
    RejectReason.TOTAL_INVALID: "El total debe ser numérico",
    RejectReason.DATE_INVALID: "La fecha no es válida",
}


class ValidationError(ValueError):
    def __init__(self, reason: RejectReason):
        self.reason = reason
        self.message = MESSAGES[reason]
        super().__init__(self.message)


class ProductValidationError(ValidationError):
    pass


class OrderValidationError(ValidationError):
    pass


class NotFoundError(LookupError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
