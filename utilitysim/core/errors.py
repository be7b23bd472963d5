import math


class InvalidArgumentError(ValueError):
    """Raised when an amount, price or plan tag is rejected."""


class PlanNotFoundError(LookupError):
    """Raised when a plan or strategy has no matching rate-table entry."""

    def __init__(self, kind: str, plan):
        self.kind = kind
        self.plan = plan
        super().__init__(f"No {kind} rate entry found for plan '{plan}'.")


def non_negative(value, message: str) -> float:
    """Return ``value`` as a float, raising InvalidArgumentError if it is negative or NaN."""
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(message) from exc
    if math.isnan(number) or number < 0:
        raise InvalidArgumentError(message)
    return number
