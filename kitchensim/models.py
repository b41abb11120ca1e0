"""Orders, cooks and the enumerations shared by the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class OrderType(IntEnum):
    """Kind of an order, and the matching speciality of a cook."""

    NORMAL = 0
    VEGAN = 1
    VIP = 2


class OrderStatus(Enum):
    """Where an order is in its life."""

    WAIT = "wait"
    SRV = "service"
    DONE = "done"


class CookStatus(Enum):
    """What a cook is doing right now."""

    AVAILABLE = "available"
    NOT_AVAILABLE = "busy"
    BREAK = "break"


class ProgramMode(IntEnum):
    """How the simulation is presented."""

    INTERACTIVE = 0
    STEP = 1
    SILENT = 2


@dataclass(eq=False)
class Order:
    """A customer order waiting for, receiving or done with service."""

    order_id: int
    kind: OrderType
    arrival_time: int
    money: float = 0.0
    size: int = 0
    distance: int = 0
    status: OrderStatus = OrderStatus.WAIT
    service_time: int = -1
    finish_time: int = -1

    def priority(self) -> float:
        """Priority used to rank VIP orders: richer, smaller, closer first."""
        return 3 * self.money - self.size - self.distance

    def current_wait(self, now: int) -> int:
        """Time the order has waited so far at timestep ``now``."""
        return now - self.arrival_time

    def total_wait(self) -> int:
        """Time spent waiting before service began, once the order is finished."""
        return self.finish_time - self.arrival_time - self.service_time

    def add_money(self, amount: float) -> None:
        """Add extra money paid for the order (e.g. on promotion)."""
        self.money += amount


@dataclass(eq=False)
class Cook:
    """A cook with a speciality, a speed and periodic breaks."""

    cook_id: int
    speed: int
    kind: OrderType
    break_duration: int
    status: CookStatus = CookStatus.AVAILABLE
    finish_time: int = 0
    completed_orders: int = 0
    order: Order | None = None

    def is_available(self) -> bool:
        """True when the cook can take an order."""
        return self.status is CookStatus.AVAILABLE

    def finish_break(self, now: int) -> bool:
        """End the current break or job if it finishes at ``now``."""
        if now == self.finish_time:
            self.status = CookStatus.AVAILABLE
            return True
        return False

    def try_start_break(self, now: int, orders_per_break: int) -> bool:
        """Send the cook on a break after every ``orders_per_break`` orders."""
        if orders_per_break <= 0:
            raise ValueError("orders_per_break must be positive")
        if self.completed_orders % orders_per_break == 0:
            self.status = CookStatus.BREAK
            self.finish_time = now + self.break_duration
            return True
        return False

    def complete_order(self) -> None:
        """Count one more completed order."""
        self.completed_orders += 1