import io

import pytest

from kitchensim.gui import (
    ASSIGNMENT_OVERFLOW,
    COLORS,
    MAX_HORIZONTAL_ORDERS,
    MAX_REGION_COUNT,
    ORDER_WIDTH,
    REST_END_X,
    REST_START_X,
    Y_HALF_DRAWING_AREA,
    ConsoleInterface,
    Region,
    item_position,
)
from kitchensim.models import Cook, Order, OrderStatus, OrderType, ProgramMode


def make_ui(text=""):
    out = io.StringIO()
    return ConsoleInterface(input=io.StringIO(text), output=out), out


def test_item_position_overflow_is_none():
    assert item_position(Region.WAITING, MAX_REGION_COUNT + 1) is None
    assert item_position(Region.WAITING, MAX_REGION_COUNT) is not None


def test_item_position_sides_of_restaurant():
    wx, wy = item_position(Region.WAITING, 1)
    cx, cy = item_position(Region.COOKS, 1)
    sx, sy = item_position(Region.SERVING, 1)
    dx, dy = item_position(Region.DONE, 1)
    assert wx < REST_START_X and dx < REST_START_X
    assert cx > REST_END_X and sx > REST_END_X
    assert wy < Y_HALF_DRAWING_AREA and cy < Y_HALF_DRAWING_AREA
    assert sy > Y_HALF_DRAWING_AREA and dy > Y_HALF_DRAWING_AREA


def test_item_position_steps_along_row():
    x1, y1 = item_position(Region.COOKS, 1)
    x2, y2 = item_position(Region.COOKS, 2)
    assert x2 - x1 == ORDER_WIDTH + 1
    assert y1 == y2
    w1, _ = item_position(Region.WAITING, 1)
    w2, _ = item_position(Region.WAITING, 2)
    assert w1 - w2 == ORDER_WIDTH + 1


def test_item_position_wraps_to_new_row():
    first = item_position(Region.SERVING, 1)
    wrapped = item_position(Region.SERVING, MAX_HORIZONTAL_ORDERS + 1)
    assert wrapped[0] == first[0]
    assert wrapped[1] > first[1]


def test_get_string_plain():
    ui, _ = make_ui("hello\n")
    assert ui.get_string() == "hello"


def test_get_string_escape_cancels():
    ui, _ = make_ui("ab\x1bcd\n")
    assert ui.get_string() == ""


def test_get_string_backspace():
    ui, _ = make_ui("abc\bd\n")
    assert ui.get_string() == "abd"


def test_get_string_backspace_on_empty_is_kept():
    ui, _ = make_ui("\bx\n")
    assert ui.get_string() == "\bx"


def test_get_string_carriage_return_ends():
    ui, _ = make_ui("in.txt\rjunk\n")
    assert ui.get_string() == "in.txt"


def test_get_string_eof_raises():
    ui, _ = make_ui("")
    with pytest.raises(EOFError):
        ui.get_string()


def test_get_mode_valid():
    ui, out = make_ui("2\n")
    assert ui.get_mode() is ProgramMode.STEP
    assert "Please select GUI mode" in out.getvalue()


def test_get_mode_retries_until_valid():
    ui, _ = make_ui("9\nabc\n0\n3\n")
    assert ui.get_mode() is ProgramMode.SILENT


def test_get_mode_eof_raises():
    ui, _ = make_ui("7\n")
    with pytest.raises(EOFError):
        ui.get_mode()


def test_print_message_sets_status():
    ui, out = make_ui()
    ui.print_message("Ts:1")
    assert ui.status_lines[0] == "Ts:1"
    assert "Ts:1" in out.getvalue()
    ui.clear_status_bar(1)
    assert ui.status_lines[0] == ""


def test_print_assignment_accumulates():
    ui, _ = make_ui()
    ui.print_assignment("V1(N2)", 0)
    ui.print_assignment("N3(N4)", 1)
    assert ui.status_lines[1] == "   V1(N2)   N3(N4)"
    ui.clear_status_bar(2)
    assert ui.status_lines[1] == ""


def test_print_assignment_overflow():
    ui, _ = make_ui()
    ui.print_assignment("x", 11)
    assert ui.status_lines[1] == ASSIGNMENT_OVERFLOW


def test_drawing_list_regions_and_colors():
    ui, _ = make_ui()
    waiting = Order(order_id=1, kind=OrderType.VIP, arrival_time=1)
    serving = Order(order_id=2, kind=OrderType.NORMAL, arrival_time=1, status=OrderStatus.SRV)
    done = Order(order_id=3, kind=OrderType.VEGAN, arrival_time=1, status=OrderStatus.DONE)
    cook = Cook(cook_id=7, speed=2, kind=OrderType.VEGAN, break_duration=3)
    for order in (waiting, serving, done):
        ui.add_order(order)
    ui.add_cook(cook)
    regions = [(item.item_id, item.region, item.color) for item in ui.drawing_list]
    assert regions == [
        (1, Region.WAITING, COLORS[OrderType.VIP]),
        (2, Region.SERVING, COLORS[OrderType.NORMAL]),
        (3, Region.DONE, COLORS[OrderType.VEGAN]),
        (7, Region.COOKS, COLORS[OrderType.VEGAN]),
    ]


def test_update_interface_places_and_prints():
    ui, out = make_ui()
    ui.add_order(Order(order_id=5, kind=OrderType.NORMAL, arrival_time=1))
    ui.add_order(Order(order_id=6, kind=OrderType.NORMAL, arrival_time=2))
    placed = ui.update_interface()
    assert [(item.item_id, x, y) for item, x, y in placed] == [
        (5, *item_position(Region.WAITING, 1)),
        (6, *item_position(Region.WAITING, 2)),
    ]
    assert "WAIT: 5 6" in out.getvalue()


def test_update_interface_drops_overflow():
    ui, _ = make_ui()
    for number in range(MAX_REGION_COUNT + 5):
        ui.add_cook(Cook(cook_id=number, speed=1, kind=OrderType.NORMAL, break_duration=1))
    placed = ui.update_interface()
    assert len(placed) == MAX_REGION_COUNT


def test_reset_drawing_list():
    ui, _ = make_ui()
    ui.add_cook(Cook(cook_id=1, speed=1, kind=OrderType.VIP, break_duration=1))
    ui.reset_drawing_list()
    assert ui.drawing_list == []
    assert ui.update_interface() == []


def test_wait_for_click_consumes_line():
    ui, _ = make_ui("\nnext\n")
    ui.wait_for_click()
    assert ui.get_string() == "next"