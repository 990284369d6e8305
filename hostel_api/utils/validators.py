import math
import re
from typing import Any, List, Optional, Tuple

# patterns are applied with fullmatch, digits are ASCII 0-9 only
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# +1234567890, 123-456-7890, (123) 456-7890, 1234567890 ...
PHONE_PATTERN = re.compile(r"[0-9\s\-+()]{10,20}")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
ALNUM_PATTERN = re.compile(r"[a-zA-Z0-9]")

ValidationResult = Tuple[bool, List[str]]


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone: str) -> bool:
    if not phone or PHONE_PATTERN.fullmatch(phone) is None:
        return False
    digits = NON_DIGIT_PATTERN.sub("", phone)
    return len(digits) >= 10


def is_valid_address(address: str) -> bool:
    """Address must be at least 5 characters and contain alphanumeric characters"""
    return bool(address) and len(address.strip()) >= 5 and ALNUM_PATTERN.search(address) is not None


def sanitize_string(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value.strip() or None


def parse_number(value: Any) -> Optional[float]:
    """Parse a JSON number or numeric string, None if it is not a finite number"""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_order_input(data: dict) -> ValidationResult:
    """
    Check an order payload before it reaches the order store.

    The checks always run in the same order so the error list is stable
    for a given payload.
    """
    errors: List[str] = []

    items = data.get("items")
    if not items or not isinstance(items, list):
        errors.append("At least one item is required")

    customer = data.get("customer")
    if customer and len(customer.strip()) < 2:
        errors.append("Customer name must be at least 2 characters")

    email = data.get("email")
    if email and not is_valid_email(email):
        errors.append("Invalid email format")

    contact_number = data.get("contact_number")
    if contact_number and not is_valid_phone_number(contact_number):
        errors.append("Invalid phone number format")

    address = data.get("address")
    if address and not is_valid_address(address):
        errors.append("Address must be at least 5 characters")

    return len(errors) == 0, errors


def validate_food_item(data: dict) -> ValidationResult:
    errors: List[str] = []

    name = data.get("name")
    if not name or len(str(name).strip()) < 2:
        errors.append("Name must be at least 2 characters")

    price = parse_number(data.get("price"))
    if price is None or price <= 0:
        errors.append("Price must be a positive number")

    category = data.get("category")
    if category is not None and len(str(category).strip()) < 1:
        errors.append("Category must not be empty")

    return len(errors) == 0, errors
