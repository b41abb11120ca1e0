"""Text-mode front end: status lines, keyboard input and the four-region layout."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from kitchensim.models import Cook, Order, OrderStatus, OrderType, ProgramMode

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 650
STATUS_BAR_HEIGHT = 150
MENU_BAR_HEIGHT = 0
DRAWING_AREA_HEIGHT = WINDOW_HEIGHT - MENU_BAR_HEIGHT - STATUS_BAR_HEIGHT
Y_HALF_DRAWING_AREA = MENU_BAR_HEIGHT + DRAWING_AREA_HEIGHT // 2
REST_START_X = int(WINDOW_WIDTH * 0.45)
REST_END_X = int(WINDOW_WIDTH * 0.55)
REST_WIDTH = REST_END_X - REST_START_X
REST_START_Y = Y_HALF_DRAWING_AREA - REST_WIDTH // 2
REST_END_Y = Y_HALF_DRAWING_AREA + REST_WIDTH // 2
FONT_SIZE = 20
ORDER_WIDTH = 2 * FONT_SIZE
ORDER_HEIGHT = FONT_SIZE
MAX_HORIZONTAL_ORDERS = ((WINDOW_WIDTH - REST_WIDTH) // 2) // (ORDER_WIDTH + 1)
MAX_VERTICAL_ORDERS = (DRAWING_AREA_HEIGHT // 2) // (ORDER_HEIGHT + 1)
MAX_REGION_COUNT = MAX_HORIZONTAL_ORDERS * MAX_VERTICAL_ORDERS

ASSIGNMENT_SLOTS = 10
ASSIGNMENT_OVERFLOW = "error index excedded number of orders in this time step"
MODE_PROMPT = "Please select GUI mode: (1)Interactive, (2)StepByStep, (3)Silent"

_ESCAPE = "\x1b"
_ENTER = "\r"
_BACKSPACE = "\b"

COLORS = {
    OrderType.NORMAL: "red",
    OrderType.VEGAN: "darkblue",
    OrderType.VIP: "violet",
}


class Region(IntEnum):
    """Screen regions in which items are laid out."""

    WAITING = 0
    COOKS = 1
    SERVING = 2
    DONE = 3


REGION_LABELS = {
    Region.WAITING: "WAIT",
    Region.COOKS: "COOK",
    Region.SERVING: "SRVG",
    Region.DONE: "DONE",
}

_STATUS_REGIONS = {
    OrderStatus.WAIT: Region.WAITING,
    OrderStatus.SRV: Region.SERVING,
    OrderStatus.DONE: Region.DONE,
}


@dataclass(frozen=True)
class DrawingItem:
    """One order or cook to be shown, with its region and colour."""

    item_id: int
    region: Region
    color: str


def item_position(region: Region, region_count: int) -> tuple[int, int] | None:
    """Screen position of the ``region_count``-th item (1-based) of ``region``.

    Returns None once the region has no room left for the item.
    """
    if region_count > MAX_REGION_COUNT:
        return None
    distance = region_count
    row = 1
    if region_count >= MAX_HORIZONTAL_ORDERS:
        distance = (region_count - 1) % MAX_HORIZONTAL_ORDERS + 1
        row = (region_count - 1) // MAX_HORIZONTAL_ORDERS + 1

    left_x = WINDOW_WIDTH // 2 - REST_WIDTH // 2
    right_x = WINDOW_WIDTH // 2 + REST_WIDTH // 2
    upper_y = Y_HALF_DRAWING_AREA - ORDER_HEIGHT
    lower_y = Y_HALF_DRAWING_AREA + ORDER_HEIGHT

    if region in (Region.WAITING, Region.DONE):
        x = left_x - distance * ORDER_WIDTH - distance
    else:
        x = right_x + (distance - 1) * ORDER_WIDTH + distance
    if region in (Region.WAITING, Region.COOKS):
        y = upper_y - row * ORDER_HEIGHT - row
    else:
        y = lower_y + (row - 1) * ORDER_HEIGHT + row
    return x, y


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class ConsoleInterface:
    """Interface to the simulation over text streams."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None) -> None:
        self._input = input
        self._output = output
        self.status_lines = ["", ""]
        self.drawing_list: list[DrawingItem] = []
        self._assignments = [""] * ASSIGNMENT_SLOTS

    @property
    def input(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")
        self.output.flush()

    # Input

    def wait_for_click(self) -> None:
        """Wait until the user presses Enter (returns at end of input)."""
        self.input.readline()

    def get_string(self) -> str:
        """Read a line typed by the user.

        Escape cancels and gives an empty string, a carriage return ends the
        text early and backspace removes the previous character.  Raises
        EOFError when the input is exhausted.
        """
        line = self.input.readline()
        if not line:
            raise EOFError("no more input")
        line = line.rstrip("\n")
        label = ""
        for key in line:
            if key == _ESCAPE:
                return ""
            if key == _ENTER:
                return label
            if key == _BACKSPACE and label:
                label = label[:-1]
            else:
                label += key
        return label

    def get_mode(self) -> ProgramMode:
        """Ask for a program mode until a valid one is given."""
        while True:
            self.print_message(MODE_PROMPT)
            choice = _atoi(self.get_string()) - 1
            if 0 <= choice < len(ProgramMode):
                return ProgramMode(choice)

    # Output

    def print_message(self, msg: str) -> None:
        """Show ``msg`` on the first status line."""
        self.clear_status_bar(1)
        self.status_lines[0] = msg
        self._write(msg)

    def print_assignment(self, msg: str, index: int) -> None:
        """Record assignment ``index`` of this timestep and show all so far."""
        if 0 <= index < ASSIGNMENT_SLOTS:
            self._assignments[index] = msg
            text = "".join("   " + entry for entry in self._assignments[: index + 1])
        else:
            text = ASSIGNMENT_OVERFLOW
        self.status_lines[1] = text
        self._write(text)

    def clear_status_bar(self, line: int) -> None:
        """Clear status line 1, or line 2 for any other value."""
        if line == 1:
            self.status_lines[0] = ""
        else:
            self.status_lines[1] = ""

    # Drawing list

    def add_order(self, order: Order) -> None:
        """Queue an order for display in the region of its status."""
        self.drawing_list.append(
            DrawingItem(order.order_id, _STATUS_REGIONS[order.status], COLORS[order.kind])
        )

    def add_cook(self, cook: Cook) -> None:
        """Queue a cook for display in the cooks' region."""
        self.drawing_list.append(DrawingItem(cook.cook_id, Region.COOKS, COLORS[cook.kind]))

    def reset_drawing_list(self) -> None:
        """Forget every queued item."""
        self.drawing_list.clear()

    def update_interface(self) -> list[tuple[DrawingItem, int, int]]:
        """Lay out the queued items, print them by region and return the placements."""
        counts = {region: 0 for region in Region}
        placed: list[tuple[DrawingItem, int, int]] = []
        for item in self.drawing_list:
            counts[item.region] += 1
            position = item_position(item.region, counts[item.region])
            if position is not None:
                placed.append((item, *position))
        for region in Region:
            ids = " ".join(str(item.item_id) for item, _, _ in placed if item.region is region)
            self._write(f"{REGION_LABELS[region]}: {ids}".rstrip())
        return placed