# trafficfsm

A traffic light modelled as a finite-state machine, built on the state
pattern. The light cycles RED → GREEN → YELLOW → RED, and a pedestrian
request can cut a green phase short once a minimum green time has passed.
An invalid timing configuration sends the light into an ERROR state.

The package also contains a small crossroad view: two roads, four vehicle
lights, four pedestrian lights with push buttons, and four crosswalks.

It has no dependencies outside the standard library. The crossroad view
uses `tkinter`, which must be available in your Python installation.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Console simulator

```
trafficfsm
```

The simulator starts in RED with these timings (`trafficfsm.cli.DEFAULT_TIMING`):

| Phase         | Duration |
|---------------|----------|
| Green         | 5 s      |
| Yellow        | 2 s      |
| Red           | 3 s      |
| Minimum green | 2 s      |

Every state change is logged to standard output with an `[INFO]` or
`[ERROR]` prefix. While it runs, type a key and press Enter:

- `p` (or `P`) to request a pedestrian crossing,
- `q` (or `Q`) to quit.

A pedestrian request made during green ends the green phase as soon as the
minimum green time has elapsed. If the simulator fails to start, it prints
`Fatal error: ...` to standard error and exits with status 1.

The key handling is available on its own as
`trafficfsm.cli.handle_input(light, stream, out)`, which reads from any
text stream and returns `True` on a quit request or `False` at end of input.

## Crossroad view

```
trafficfsm-view
```

Opens an 800 × 600 window titled "Traffic Light FSM" showing the crossroad
on a scrollable 1000 × 1000 canvas. Clicking the button at the bottom of a
pedestrian light toggles it between red and green and darkens or lightens
the button.

`trafficfsm.app.render(canvas, scene)` draws a scene onto any canvas with
Tk's `delete`, `create_rectangle` and `create_oval` methods and returns the
ids of the shapes it created.

## Library use

The state machine lives in `trafficfsm.machine`:

- `Timing(green, yellow, red, min_green)` holds the durations in seconds.
- `TrafficLight(config)` takes a `Timing` or four numbers in that order,
  and holds the current state and the pedestrian flag.
- `initialize(logger)` attaches a logger (a `ConsoleLogger` if `None`),
  checks the configuration and puts the light in RED, or in `ErrorState`
  if a duration other than the minimum green is not positive.
- `step(elapsed)` feeds the time spent in the current state to the state's
  `update`, which may move the light on with `change_state`; it returns
  `True` if the state changed and raises `RuntimeError` if the light was
  never initialized.
- `request_pedestrian()` registers a crossing request.
- `run(clock, sleep)` drives the light every 10 ms until `stop()` is
  called; an exception raised inside the loop is logged and the light
  moves to `ErrorState`.

States are `RedState`, `YellowState`, `GreenState` and `ErrorState`; each
logs when it is entered and left (`ErrorState` at the ERROR level), and
`str()` gives its name.

```python
from trafficfsm.machine import Timing, TrafficLight

light = TrafficLight(Timing(green=5, yellow=2, red=3, min_green=2))
light.initialize(None)
light.step(3.0)          # RED -> GREEN
light.request_pedestrian()
light.step(2.0)          # GREEN -> YELLOW once min_green has passed
print(light.current_state)  # YELLOW
```

Logging goes through `trafficfsm.logger`: `ConsoleLogger` writes to a
stream (standard output by default), `FileLogger` appends to a file (and
can be used as a context manager), and `MultiLogger` fans a message out to
every logger added with `add_logger`. Levels are given by `LogLevel`, and
`level_prefix` returns the text written in front of each message.

The crossroad is available without a window through
`trafficfsm.scene.TrafficScene`, whose `item_at` and `click` methods find
and press items by scene coordinates. Its items (`RoadItem`, and
`CrosswalkItem` and `TrafficLightItem` from `trafficfsm.items`) describe
themselves as lists of `DrawOp` shapes through `paint()`.

## What it does not do

- The crossroad view is not connected to the state machine: its vehicle
  lights always show all three lamps, and the pedestrian lights change only
  when their buttons are clicked.
- The console simulator always logs to the console; it has no options for
  other timings or for logging to a file.