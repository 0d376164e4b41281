# catalog/domain/validation.py
"""
Validation rules for product and order payloads.

Each validator either returns a normalized record (a plain dict with the
public camelCase field names) or raises a ValidationError subclass carrying
a RejectReason. Checks run in a fixed order and stop at the first failure.

Uniqueness checks need to look at stored products, so the product validators
take a ProductLookup (ProductRepo implements it).
"""
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, NoReturn, Optional, Protocol

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from catalog.domain.errors import (
    RejectReason,
    ProductValidationError,
    OrderValidationError,
)

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
DETAILS_MAX_LENGTH = 300
ID_MAX_LENGTH = 64

IMAGE_URL_RE = re.compile(r"https?://.+\.(jpg|jpeg|png|webp|avif|gif|svg)", re.IGNORECASE)

GUEST_USER = "guest"
ORDER_INITIAL_STATUS = "pendiente"

_datetime_adapter = TypeAdapter(datetime)


class ProductLookup(Protocol):
    def id_exists(self, product_id: str) -> bool: ...

    def title_taken(self, title: str, exclude_id: Optional[str] = None) -> bool: ...

    def image_taken(self, image: str, exclude_id: Optional[str] = None) -> bool: ...


def parse_number(value: Any) -> Optional[float]:
    """
    Numeric strings and numbers become floats; anything else
    (bool, None, nan, inf, garbage) gives None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None

    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(number):
        return None
    return number


def _fail(reason: RejectReason) -> NoReturn:
    raise ProductValidationError(reason)


#field checks, shared by create and update

def _check_title(title: Any) -> str:
    if not isinstance(title, str):
        _fail(RejectReason.TITLE_NOT_TEXT)
    if not title.strip():
        _fail(RejectReason.TITLE_EMPTY)
    if len(title) > TITLE_MAX_LENGTH:
        _fail(RejectReason.TITLE_TOO_LONG)
    return title.strip()


def _check_text(value: Any, max_length: int, not_text: RejectReason, too_long: RejectReason) -> str:
    if not isinstance(value, str):
        _fail(not_text)
    if len(value) > max_length:
        _fail(too_long)
    return value


def _check_amount(value: Any, reason: RejectReason) -> float:
    number = parse_number(value)
    if number is None or number < 0:
        _fail(reason)
    return number


def _check_image(image: Any) -> str:
    if not isinstance(image, str):
        _fail(RejectReason.IMAGE_INVALID)
    image = image.strip()
    if image and not IMAGE_URL_RE.fullmatch(image):
        _fail(RejectReason.IMAGE_INVALID)
    return image


def _check_category(category: Any) -> str:
    if not isinstance(category, str) or not category.strip():
        _fail(RejectReason.CATEGORY_REQUIRED)
    return category


def _check_sizes(sizes: Any) -> list:
    if not isinstance(sizes, (list, tuple)):
        _fail(RejectReason.SIZES_NOT_LIST)
    return list(sizes)


def _check_badge(badge: Any) -> str:
    if badge is None:
        return ""
    if not isinstance(badge, str):
        _fail(RejectReason.BADGE_NOT_TEXT)
    return badge


def validate_product_create(payload: Mapping[str, Any], lookup: ProductLookup) -> Dict[str, Any]:
    """
    Validate a new product and build the record to store.

    Optional fields that are missing or null get their defaults:
    "" for text, [] for sizes, price for originalPrice. The image
    duplicate check only runs for a non-empty image.
    """
    title = payload.get("title")
    if title is None:
        _fail(RejectReason.TITLE_REQUIRED)
    title = _check_title(title)

    description = payload.get("description")
    if description is not None:
        _check_text(description, DESCRIPTION_MAX_LENGTH,
                    RejectReason.DESCRIPTION_NOT_TEXT, RejectReason.DESCRIPTION_TOO_LONG)

    details = payload.get("details")
    if details is not None:
        _check_text(details, DETAILS_MAX_LENGTH,
                    RejectReason.DETAILS_NOT_TEXT, RejectReason.DETAILS_TOO_LONG)

    price = _check_amount(payload.get("price"), RejectReason.PRICE_INVALID)

    original_price = price
    if payload.get("originalPrice") is not None:
        original_price = _check_amount(payload["originalPrice"], RejectReason.ORIGINAL_PRICE_INVALID)

    image = ""
    if payload.get("image") is not None:
        image = _check_image(payload["image"])

    category = _check_category(payload.get("category"))

    sizes = []
    if payload.get("sizes") is not None:
        sizes = _check_sizes(payload["sizes"])

    badge = _check_badge(payload.get("badge"))

    product_id = str(payload["id"]) if payload.get("id") else None
    if product_id and len(product_id) > ID_MAX_LENGTH:
        _fail(RejectReason.ID_TOO_LONG)
    if product_id and lookup.id_exists(product_id):
        _fail(RejectReason.ID_DUPLICATE)

    if lookup.title_taken(title):
        _fail(RejectReason.TITLE_DUPLICATE)

    if image and lookup.image_taken(image):
        _fail(RejectReason.IMAGE_DUPLICATE)

    return {
        "id": product_id,
        "badge": badge,
        "image": image,
        "title": title,
        "description": description or "",
        "details": details or "",
        "sizes": sizes,
        "price": price,
        "originalPrice": original_price,
        "category": category,
        "createdAt": datetime.now(timezone.utc),
    }


def validate_product_update(existing_id: str, payload: Mapping[str, Any], lookup: ProductLookup) -> Dict[str, Any]:
    """
    Validate a partial update. Only keys present in the payload are checked
    and returned (an explicit null counts as present); updatedAt is always set.
    Uniqueness checks skip the product being updated.
    """
    changes: Dict[str, Any] = {}

    if "title" in payload:
        changes["title"] = _check_title(payload["title"])

    if "description" in payload:
        changes["description"] = _check_text(
            payload["description"], DESCRIPTION_MAX_LENGTH,
            RejectReason.DESCRIPTION_NOT_TEXT, RejectReason.DESCRIPTION_TOO_LONG,
        )

    if "details" in payload:
        changes["details"] = _check_text(
            payload["details"], DETAILS_MAX_LENGTH,
            RejectReason.DETAILS_NOT_TEXT, RejectReason.DETAILS_TOO_LONG,
        )

    if "price" in payload:
        changes["price"] = _check_amount(payload["price"], RejectReason.PRICE_INVALID)

    if "originalPrice" in payload:
        changes["originalPrice"] = _check_amount(payload["originalPrice"], RejectReason.ORIGINAL_PRICE_INVALID)

    if "image" in payload:
        changes["image"] = _check_image(payload["image"])

    if "category" in payload:
        changes["category"] = _check_category(payload["category"])

    if "sizes" in payload:
        changes["sizes"] = _check_sizes(payload["sizes"])

    if "badge" in payload:
        changes["badge"] = _check_badge(payload["badge"])

    if "title" in changes and lookup.title_taken(changes["title"], exclude_id=existing_id):
        _fail(RejectReason.TITLE_DUPLICATE)

    #clearing the image ("") never collides
    if changes.get("image") and lookup.image_taken(changes["image"], exclude_id=existing_id):
        _fail(RejectReason.IMAGE_DUPLICATE)

    changes["updatedAt"] = datetime.now(timezone.utc)
    return changes


def validate_order_create(payload: Mapping[str, Any]) -> Dict[str, Any]:
    items = payload.get("items")
    if not isinstance(items, (list, tuple)) or len(items) == 0:
        raise OrderValidationError(RejectReason.ITEMS_EMPTY)

    total = 0.0
    if payload.get("total") is not None:
        total = parse_number(payload["total"])
        if total is None:
            raise OrderValidationError(RejectReason.TOTAL_INVALID)

    now = datetime.now(timezone.utc)
    date = now
    if payload.get("date") is not None:
        try:
            date = _datetime_adapter.validate_python(payload["date"])
        except PydanticValidationError:
            raise OrderValidationError(RejectReason.DATE_INVALID)

    return {
        "user": payload.get("user") or GUEST_USER,
        "items": list(items),
        "total": total,
        "date": date,
        "status": ORDER_INITIAL_STATUS,
        "createdAt": now,
    }
