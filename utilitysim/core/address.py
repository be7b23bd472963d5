from dataclasses import dataclass
from typing import Optional

from utilitysim.core.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True, kw_only=True)
class Address:
    """Physical location a utility account is attached to."""

    street: str
    city: str
    postal_code: str = ""
    unit: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.street, str) or not self.street.strip():
            raise InvalidArgumentError("Street must not be empty.")
        if not isinstance(self.city, str) or not self.city.strip():
            raise InvalidArgumentError("City must not be empty.")

    def display(self) -> str:
        parts = [self.street]
        if self.unit:
            parts.append(f"Unit {self.unit}")
        locality = f"{self.city} {self.postal_code}".strip()
        parts.append(locality)
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.display()
