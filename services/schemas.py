from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.errors import ValidationFailed


class ShippingAddress(BaseModel):
    model_config = ConfigDict(strict=True)

    recipient_name: str
    phone_number: str
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    province: str
    postal_code: str
    country: str


class LineItem(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    id: int = Field(gt=0)
    name: str
    price: float
    quantity: int = Field(gt=0)


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    user_id: UUID
    address: ShippingAddress
    payment_method_id: int = Field(gt=0)
    items: List[LineItem] = Field(min_length=1)
    subtotal: float
    shipping: float
    tax: float
    total: float


def field_errors(exc: ValidationError):
    """Flatten pydantic errors to JSON-safe ``{field, message, type}`` dicts."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def parse_place_order(raw) -> PlaceOrderRequest:
    """Validate a raw JSON request body.

    Parsed as JSON in strict mode: numbers must be JSON numbers (no
    strings or booleans) and must be finite. UUIDs arrive as strings.
    """
    try:
        return PlaceOrderRequest.model_validate_json(raw or b"", strict=True)
    except ValidationError as exc:
        raise ValidationFailed("Invalid data format", field_errors(exc))
