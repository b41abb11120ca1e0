# kitchensim

A time-step simulation of a restaurant kitchen. Orders of three kinds arrive:
normal, vegan and VIP. Cooks of the same three kinds take them. A cook goes on
a break after every so many completed orders. A normal order that has waited
exactly the auto-promotion time is promoted to VIP on its own. Orders can also
be cancelled or promoted by events in the input file.

## Installing

```
pip install .
```

## Running

```
kitchensim [input] [output] [--mode {1,2,3}]
```

- `input` is the input file. If it is left out, the program asks for its name
  and keeps asking until a file can be opened.
- `output` is the report file. If it is left out, the program asks for its
  name once the simulation is over.
- `--mode` picks the mode: `1` interactive (press Enter after each time step),
  `2` step by step (one time step per second), `3` silent. If it is left out,
  the program asks for it.

If standard input runs out while the program is asking for something, it
stops with exit status 1.

At each time step the program prints a status line with the queue sizes, one
line per cook assigned in that step (for example `N7(V3)`: normal cook 7
took order 3, now a VIP order), and the item ids in each of the four regions
`WAIT`, `COOK`, `SRVG` and `DONE`.

## Input file

The input file holds whitespace-separated values in this order:

```
N G V            number of normal, vegan and VIP cooks
SN SG SV         dishes per time step for each cook kind
BO BN BG BV      orders before a break, then break length for each kind
AutoP            wait time after which a normal order becomes VIP
M                number of events
```

After these come `M` events:

- `R <type> <time> <id> <size> <money>` is an arrival. The type is `N`, `G`
  or `V`; any other type raises `ValueError`.
- `X <time> <id>` cancels a waiting normal order.
- `P <time> <id> <extra>` promotes a waiting normal order to VIP and adds
  `extra` to its money.

Events must be listed in time order. A missing or non-integer value raises
`ValueError`.

## How the kitchen works

- VIP orders are served first, richest, smallest and closest first
  (priority `3 * money - size - distance`), by a VIP cook, else a normal
  cook, else a vegan cook.
- Vegan orders are then served in arrival order, by vegan cooks only.
- Normal orders are then served in arrival order, by a normal cook, else a
  VIP cook.
- Service takes `ceil(size / speed)` time steps.

## Output

The report starts with the header `FT    ID    AT    WT    ST`, then one line
per finished order: finish time, id, arrival time, wait time and service
time. After those lines come totals by order kind and available cook kind,
the average wait and service times (`nan` when no order finished), and the
number of orders that were promoted automatically.

## Using it from Python

```python
from kitchensim.restaurant import Restaurant
from kitchensim.models import ProgramMode

rest = Restaurant()
with open("input.txt") as source:
    rest.load(source)
last_step = rest.run(ProgramMode.SILENT)
with open("output.txt", "w") as stream:
    rest.write_report(stream)
```

`Restaurant` takes an optional `ConsoleInterface` (from `kitchensim.gui`),
which can be given its own `input` and `output` text streams, and a
`step_delay` for step-by-step mode. `Restaurant.step(now)` runs a single time
step and returns the next one.

The building blocks are also available on their own:

- `kitchensim.models`: `Order`, `Cook` and the enums `OrderType`,
  `OrderStatus`, `CookStatus` and `ProgramMode`.
- `kitchensim.pqueue`: `PriorityQueue`, where the highest priority comes
  first and equal low priorities keep their arrival order.
- `kitchensim.events`: `ArrivalEvent`, `CancellationEvent`,
  `PromotionEvent` and `HealthProblemEvent`. `HealthProblemEvent` has no
  effect.
- `kitchensim.gui`: `ConsoleInterface`, `Region`, `DrawingItem` and
  `item_position`, which computes where an item sits in its region.

## What it does not do

There is no graphical window. The display is plain text on standard output.
`item_position` computes screen coordinates, but nothing draws them.