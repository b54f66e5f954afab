"""Console front end for the traffic light state machine."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import IO

from trafficfsm.logger import ConsoleLogger
from trafficfsm.machine import Timing, TrafficLight

DEFAULT_TIMING = Timing(green=5.0, yellow=2.0, red=3.0, min_green=2.0)


def handle_input(light: TrafficLight, stream: IO[str], out: IO[str]) -> bool:
    """Read key presses; return True on a quit request, False at end of input."""
    out.write("Press 'p' to request pedestrian crossing, 'q' to quit:\n")
    out.flush()
    for line in stream:
        for char in line:
            if char in "pP":
                light.request_pedestrian()
                out.write("Pedestrian request sent!\n")
                out.flush()
            elif char in "qQ":
                out.write("Exiting program...\n")
                out.flush()
                return True
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the traffic light until the user quits."""
    parser = argparse.ArgumentParser(
        prog="trafficfsm",
        description="Traffic light state machine with a pedestrian button.",
    )
    parser.parse_args(argv)
    try:
        light = TrafficLight(DEFAULT_TIMING)
        light.initialize(ConsoleLogger())

        def watch_input() -> None:
            if handle_input(light, sys.stdin, sys.stdout):
                light.stop()

        threading.Thread(target=watch_input, daemon=True).start()
        light.run()
    except Exception as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())