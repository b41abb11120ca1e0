"""The restaurant: cooks, waiting lists, event handling and the simulation loop."""

from __future__ import annotations

import argparse
import time
from collections import deque
from typing import Iterator, TextIO

from kitchensim.events import ArrivalEvent, CancellationEvent, Event, PromotionEvent
from kitchensim.gui import ConsoleInterface
from kitchensim.models import Cook, CookStatus, Order, OrderStatus, OrderType, ProgramMode
from kitchensim.pqueue import PriorityQueue

_TYPE_CODES = {
    OrderType.NORMAL: "N",
    OrderType.VEGAN: "Veg",
    OrderType.VIP: "V",
}

_ARRIVAL_TYPES = {
    "N": OrderType.NORMAL,
    "G": OrderType.VEGAN,
    "V": OrderType.VIP,
}

REPORT_HEADER = "FT    ID    AT    WT    ST"


def type_code(kind: OrderType) -> str:
    """Short label of an order or cook type, as shown in assignment messages."""
    return _TYPE_CODES[kind]


class _Tokens:
    """Whitespace-separated tokens of an input file."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


class Restaurant:
    """Holds every queue of the simulation and advances it one timestep at a time."""

    def __init__(
        self,
        interface: ConsoleInterface | None = None,
        *,
        orders_per_break: int = 1,
        auto_promote_after: int | None = None,
        step_delay: float = 1.0,
    ) -> None:
        self.interface = interface if interface is not None else ConsoleInterface()
        self.step_delay = step_delay
        self.orders_per_break = orders_per_break
        self.auto_promote_after = auto_promote_after
        self.auto_promoted = 0

        self.events: deque[Event] = deque()
        self.normal_cooks: deque[Cook] = deque()
        self.vegan_cooks: deque[Cook] = deque()
        self.vip_cooks: deque[Cook] = deque()
        self.busy_cooks: PriorityQueue[Cook] = PriorityQueue()

        self.normal_waiting: deque[Order] = deque()
        self.vegan_waiting: deque[Order] = deque()
        self.vip_waiting: PriorityQueue[Order] = PriorityQueue()
        self.finished: deque[Order] = deque()

    # Loading

    def load(self, source: TextIO) -> None:
        """Read cooks, restaurant rules and events from a text stream."""
        tokens = _Tokens(source.read())
        normal_count, vegan_count, vip_count = (tokens.integer() for _ in range(3))
        normal_speed, vegan_speed, vip_speed = (tokens.integer() for _ in range(3))
        self.orders_per_break = tokens.integer()
        normal_break, vegan_break, vip_break = (tokens.integer() for _ in range(3))
        self.auto_promote_after = tokens.integer()
        event_count = tokens.integer()

        total = normal_count + vegan_count + vip_count
        self.auto_promoted = 0

        for i in range(normal_count):
            self.normal_cooks.append(
                Cook((i + 1) * 2 + total, normal_speed, OrderType.NORMAL, normal_break)
            )
        for i in range(normal_count, normal_count + vegan_count):
            self.vegan_cooks.append(
                Cook((i + 1) * 3 + total, vegan_speed, OrderType.VEGAN, vegan_break)
            )
        for i in range(normal_count + vegan_count, total):
            self.vip_cooks.append(Cook((i + 1) * 5 + total, vip_speed, OrderType.VIP, vip_break))

        for _ in range(event_count):
            letter = tokens.word()
            if letter == "R":
                code = tokens.word()
                if code not in _ARRIVAL_TYPES:
                    raise ValueError(f"unknown order type {code!r}")
                timestep = tokens.integer()
                order_id = tokens.integer()
                size = tokens.integer()
                money = tokens.integer()
                self.events.append(
                    ArrivalEvent(timestep, order_id, _ARRIVAL_TYPES[code], size, money, 0)
                )
            elif letter == "X":
                timestep = tokens.integer()
                order_id = tokens.integer()
                self.events.append(CancellationEvent(timestep, order_id))
            elif letter == "P":
                timestep = tokens.integer()
                order_id = tokens.integer()
                extra = tokens.integer()
                self.events.append(PromotionEvent(timestep, order_id, extra))

    # Events and queues

    def execute_events(self, now: int) -> None:
        """Run every pending event whose time has come."""
        while self.events and self.events[0].time <= now:
            self.events[0].execute(self)
            self.events.popleft()

    def add_order(self, order: Order) -> None:
        """Put a new order on the waiting list of its type."""
        if order.kind is OrderType.NORMAL:
            self.normal_waiting.append(order)
        elif order.kind is OrderType.VEGAN:
            self.vegan_waiting.append(order)
        else:
            self.vip_waiting.push(order, order.priority())

    def add_cook(self, cook: Cook) -> None:
        """Make a cook available again in the queue of its type."""
        cook.status = CookStatus.AVAILABLE
        self._cook_queue(cook.kind).append(cook)

    def _cook_queue(self, kind: OrderType) -> deque[Cook]:
        if kind is OrderType.NORMAL:
            return self.normal_cooks
        if kind is OrderType.VEGAN:
            return self.vegan_cooks
        return self.vip_cooks

    def _take_normal(self, order_id: int) -> Order | None:
        for order in self.normal_waiting:
            if order.order_id == order_id:
                self.normal_waiting.remove(order)
                return order
        return None

    def cancel_order(self, order_id: int) -> bool:
        """Drop a waiting normal order; False if there is none with that id."""
        return self._take_normal(order_id) is not None

    def promote_order(self, order_id: int, extra: float) -> bool:
        """Move a waiting normal order to the VIP list, adding ``extra`` money."""
        order = self._take_normal(order_id)
        if order is None:
            return False
        order.add_money(extra)
        order.kind = OrderType.VIP
        self.vip_waiting.push(order, order.priority())
        return True

    def auto_promote(self, now: int) -> int:
        """Promote normal orders that have waited exactly the limit; return how many."""
        if self.auto_promote_after is None:
            return 0
        promoted = 0
        while (
            self.normal_waiting
            and self.normal_waiting[0].current_wait(now) == self.auto_promote_after
        ):
            order = self.normal_waiting.popleft()
            order.kind = OrderType.VIP
            self.vip_waiting.push(order, order.priority())
            promoted += 1
        return promoted

    def finish_orders(self, now: int) -> None:
        """Release cooks whose job or break ends at ``now``."""
        while self.busy_cooks and self.busy_cooks.peek().finish_time == now:
            cook = self.busy_cooks.pop()
            if cook.status is CookStatus.BREAK:
                self.add_cook(cook)
                continue
            order = cook.order
            if order is not None:
                order.status = OrderStatus.DONE
                self.finished.append(order)
            cook.complete_order()
            cook.order = None
            if cook.try_start_break(now, self.orders_per_break):
                self.busy_cooks.push(cook, -cook.finish_time)
            else:
                self.add_cook(cook)

    def _assign(self, order: Order, cook: Cook, now: int, index: int) -> None:
        service = -(-order.size // cook.speed)
        finish = service + now
        cook.finish_time = finish
        order.service_time = service
        order.finish_time = finish
        order.status = OrderStatus.SRV
        cook.order = order
        cook.status = CookStatus.NOT_AVAILABLE
        self.interface.print_assignment(
            f"{type_code(cook.kind)}{cook.cook_id}({type_code(order.kind)}{order.order_id})",
            index,
        )
        self.busy_cooks.push(cook, -finish)

    def serve_orders(self, now: int) -> None:
        """Hand waiting orders to available cooks: VIP first, then vegan, then normal."""
        index = -1
        while self.vip_waiting:
            queue = next(
                (q for q in (self.vip_cooks, self.normal_cooks, self.vegan_cooks) if q), None
            )
            if queue is None:
                break
            index += 1
            self._assign(self.vip_waiting.pop(), queue.popleft(), now, index)

        while self.vegan_waiting and self.vegan_cooks:
            index += 1
            self._assign(self.vegan_waiting.popleft(), self.vegan_cooks.popleft(), now, index)

        while self.normal_waiting:
            queue = next((q for q in (self.normal_cooks, self.vip_cooks) if q), None)
            if queue is None:
                break
            index += 1
            self._assign(self.normal_waiting.popleft(), queue.popleft(), now, index)

    # Display

    def fill_drawing_list(self) -> None:
        """Queue every cook and order on the interface's drawing list."""
        cooks: PriorityQueue[Cook] = PriorityQueue()
        for queue in (self.normal_cooks, self.vip_cooks, self.vegan_cooks):
            for cook in queue:
                cooks.push(cook, -cook.finish_time)
        for cook in cooks:
            self.interface.add_cook(cook)

        waiting: PriorityQueue[Order] = PriorityQueue()
        for orders in (self.normal_waiting, self.vegan_waiting, self.vip_waiting):
            for order in orders:
                waiting.push(order, -order.arrival_time)
        for order in waiting:
            self.interface.add_order(order)

        for cook in self.busy_cooks:
            if cook.order is not None:
                self.interface.add_order(cook.order)
        for order in self.finished:
            self.interface.add_order(order)

    def status_line(self, now: int) -> str:
        """Summary of the queues shown at the start of a timestep."""
        orders = (
            f"    Normal waiting: {len(self.normal_waiting)}"
            f"    Vegan waiting: {len(self.vegan_waiting)}"
            f"    VIP waiting: {len(self.vip_waiting)}"
        )
        cooks = (
            f"    Normal cook avail: {len(self.normal_cooks)}"
            f"    Vegan cook avail: {len(self.vegan_cooks)}"
            f"    VIP cook avail: {len(self.vip_cooks)}"
        )
        served = f"    served: {len(self.finished)}"
        return f"Ts:{now}{orders}{cooks}{served}"

    # Simulation

    def step(self, now: int) -> int:
        """Simulate timestep ``now`` and return the next timestep."""
        self.interface.print_message(self.status_line(now))
        self.execute_events(now)
        self.finish_orders(now)
        self.auto_promoted += self.auto_promote(now)
        self.serve_orders(now)
        self.fill_drawing_list()
        self.interface.update_interface()
        self.interface.reset_drawing_list()
        return now + 1

    def is_finished(self) -> bool:
        """True once no events, waiting orders or busy cooks remain."""
        return not (
            self.events
            or self.normal_waiting
            or self.vip_waiting
            or self.vegan_waiting
            or self.busy_cooks
        )

    def run(self, mode: ProgramMode) -> int:
        """Run the simulation to the end in ``mode``; return the last timestep simulated."""
        now = 1
        while not self.is_finished():
            now = self.step(now)
            if mode is ProgramMode.INTERACTIVE:
                self.interface.wait_for_click()
                self.interface.clear_status_bar(2)
            elif mode is ProgramMode.STEP:
                time.sleep(self.step_delay)
                self.interface.clear_status_bar(2)
        return now - 1

    def write_report(self, stream: TextIO) -> None:
        """Write the finished orders and the summary statistics."""
        counts = {kind: 0 for kind in OrderType}
        total_wait = 0.0
        total_service = 0.0
        stream.write(REPORT_HEADER + "\n")
        for order in self.finished:
            stream.write(
                f"{order.finish_time}    {order.order_id}     {order.arrival_time}     "
                f"{order.total_wait()}     {order.service_time}\n"
            )
            counts[order.kind] += 1
            total_service += order.service_time
            total_wait += order.total_wait()

        normal, vegan, vip = (counts[k] for k in OrderType)
        orders = normal + vegan + vip
        cook_normal = len(self.normal_cooks)
        cook_vegan = len(self.vegan_cooks)
        cook_vip = len(self.vip_cooks)
        avg_wait = total_wait / orders if orders else float("nan")
        avg_service = total_service / orders if orders else float("nan")
        stream.write(f"Orders: {orders}  [Norm: {normal}, Veg: {vegan}, VIP: {vip} ]\n")
        stream.write(
            f"Cooks:{cook_normal + cook_vegan + cook_vip}  "
            f"[Norm: {cook_normal}, Veg: {cook_vegan}, VIP: {cook_vip} ]\n"
        )
        stream.write(f"Avg Wait= {avg_wait:g}, Avg Serv= {avg_service:g}\n")
        stream.write(f"Auto-Promoted: {self.auto_promoted}")


def _open_input(interface: ConsoleInterface, name: str | None) -> TextIO:
    if name is None:
        interface.clear_status_bar(2)
        interface.print_message("Write input filename : ")
        name = interface.get_string()
    while True:
        try:
            return open(name, encoding="utf-8")
        except OSError:
            interface.clear_status_bar(2)
            interface.print_message("Wrong filename, Please Enter the correct input filename : ")
            name = interface.get_string()


def main(argv: list[str] | None = None) -> int:
    """Load a restaurant file, simulate it and write the report."""
    parser = argparse.ArgumentParser(prog="kitchensim", description="Restaurant simulation.")
    parser.add_argument("input", nargs="?", help="input file")
    parser.add_argument("output", nargs="?", help="report file")
    parser.add_argument("--mode", type=int, choices=(1, 2, 3),
                        help="1 interactive, 2 step by step, 3 silent")
    args = parser.parse_args(argv)

    interface = ConsoleInterface()
    restaurant = Restaurant(interface)
    try:
        with _open_input(interface, args.input) as source:
            restaurant.load(source)
        mode = ProgramMode(args.mode - 1) if args.mode else interface.get_mode()
        restaurant.run(mode)
        output_name = args.output
        if output_name is None:
            interface.clear_status_bar(2)
            interface.print_message("Write output filename : ")
            output_name = interface.get_string()
    except EOFError:
        return 1
    with open(output_name, "w", encoding="utf-8") as stream:
        restaurant.write_report(stream)
    return 0