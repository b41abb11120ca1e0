"""Timed events that drive the restaurant simulation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from kitchensim.models import Order, OrderType


@dataclass
class Event(ABC):
    """Something that happens to an order at a given timestep."""

    time: int
    order_id: int

    @abstractmethod
    def execute(self, restaurant: Any) -> None:
        """Apply the event to ``restaurant``."""


@dataclass
class ArrivalEvent(Event):
    """A new order arrives."""

    kind: OrderType
    size: int = 0
    money: float = 0.0
    distance: int = 0

    def execute(self, restaurant: Any) -> None:
        order = Order(
            order_id=self.order_id,
            kind=self.kind,
            arrival_time=self.time,
            money=self.money,
            size=self.size,
            distance=self.distance,
        )
        restaurant.add_order(order)


@dataclass
class CancellationEvent(Event):
    """A waiting normal order is cancelled."""

    def execute(self, restaurant: Any) -> None:
        restaurant.cancel_order(self.order_id)


@dataclass
class PromotionEvent(Event):
    """A waiting normal order is promoted to VIP for extra money."""

    extra: float = 0

    def execute(self, restaurant: Any) -> None:
        restaurant.promote_order(self.order_id, self.extra)


@dataclass
class HealthProblemEvent(Event):
    """A cook falls ill; it has no effect on the restaurant."""

    def execute(self, restaurant: Any) -> None:
        return None