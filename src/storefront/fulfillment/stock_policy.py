"""Low-stock signal — advisory threshold check run after every deduction."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LowStockPolicy:
    threshold: int = 10

    def is_low(self, product) -> bool:
        return product.stock < self.threshold
