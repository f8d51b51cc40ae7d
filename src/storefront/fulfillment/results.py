"""Inputs and outcomes of fulfillment operations."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class LineRequest:
    """One requested line of an order: which product and how many."""

    product_id: int
    quantity: int


class Outcome(Enum):
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"
    NOT_FOUND = "Not_Found"
    INVALID_STATE = "Invalid_State"
    ALREADY_CANCELLED = "Already_Cancelled"
    PERSISTENCE_FAILED = "Persistence_Failed"


@dataclass(frozen=True)
class TransitionResult:
    """Result of a ship or cancel request.

    Policy rejections (NOT_FOUND, INVALID_STATE, ALREADY_CANCELLED) and
    PERSISTENCE_FAILED are all unsuccessful but stay distinguishable.
    """

    success: bool
    outcome: Outcome
    order_id: int
    status: str | None = None
    reason: str | None = None
    skipped: tuple = ()

    def __bool__(self) -> bool:
        return self.success
