"""Traffic light finite-state machine."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from trafficfsm.logger import ConsoleLogger, Logger, LogLevel

_TICK = 0.01


@dataclass(frozen=True)
class Timing:
    """Phase durations in seconds."""

    green: float
    yellow: float
    red: float
    min_green: float


class TrafficLightState:
    """A phase of the traffic light."""

    name = "STATE"
    level = LogLevel.INFO

    def enter(self, light: TrafficLight) -> None:
        light.logger.log(self.level, f"Entering state: {self}")

    def exit(self, light: TrafficLight) -> None:
        light.logger.log(self.level, f"Exiting state: {self}")

    def update(self, light: TrafficLight, elapsed: float) -> None:
        """React to the time spent in this state so far."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.name


class RedState(TrafficLightState):
    """Vehicles stop."""

    name = "RED"

    def update(self, light: TrafficLight, elapsed: float) -> None:
        if elapsed >= light.config.red:
            light.change_state(GreenState())


class YellowState(TrafficLightState):
    """Vehicles prepare to stop."""

    name = "YELLOW"

    def update(self, light: TrafficLight, elapsed: float) -> None:
        if elapsed >= light.config.yellow:
            light.change_state(RedState())


class GreenState(TrafficLightState):
    """Vehicles go; a pedestrian request may cut the phase short."""

    name = "GREEN"

    def update(self, light: TrafficLight, elapsed: float) -> None:
        config = light.config
        if elapsed >= config.green or (
            light.pedestrian_requested and elapsed >= config.min_green
        ):
            if light.pedestrian_requested:
                light.logger.log(LogLevel.INFO, "Pedestrian request acknowledged")
            light.change_state(YellowState())


class ErrorState(TrafficLightState):
    """Fault state; the light stays here."""

    name = "ERROR"
    level = LogLevel.ERROR

    def enter(self, light: TrafficLight) -> None:
        super().enter(light)

    def exit(self, light: TrafficLight) -> None:
        super().exit(light)

    def update(self, light: TrafficLight, elapsed: float) -> None:
        light.logger.log(LogLevel.ERROR, "Traffic light in ERROR state")


class TrafficLight:
    """Context of the state machine: configuration, current state and logger."""

    def __init__(self, config: Timing | Iterable[float]) -> None:
        self.config = config if isinstance(config, Timing) else Timing(*config)
        self.pedestrian_requested = False
        self.current_state: TrafficLightState | None = None
        self.logger: Logger = ConsoleLogger()
        self._stop = threading.Event()

    def change_state(self, new_state: TrafficLightState | None) -> None:
        """Leave the current state and enter the new one."""
        if self.current_state is not None:
            self.current_state.exit(self)
        self.current_state = new_state
        if self.current_state is not None:
            self.current_state.enter(self)

    def initialize(self, logger: Logger | None = None) -> None:
        """Attach a logger, validate the timing and start in RED."""
        self.logger = logger if logger is not None else ConsoleLogger()
        config = self.config
        # The minimum green time may be zero; the other phases may not.
        if any(d <= 0 for d in (config.green, config.yellow, config.red)):
            self.logger.log(LogLevel.ERROR, "Invalid traffic light configuration")
            self.change_state(ErrorState())
            return
        self.current_state = RedState()

    def request_pedestrian(self) -> None:
        """Register a pedestrian crossing request."""
        if isinstance(self.current_state, GreenState):
            self.logger.log(
                LogLevel.INFO, "Pedestrian request received during GREEN state"
            )
        else:
            self.logger.log(
                LogLevel.INFO, "Pedestrian request received (not in GREEN state)"
            )
        self.pedestrian_requested = True

    def step(self, elapsed: float) -> bool:
        """Update the current state; return True if the state changed."""
        state = self.current_state
        if state is None:
            raise RuntimeError("Traffic light not initialized")
        state.update(self, elapsed)
        return self.current_state is not state

    def run(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        """Drive the machine until stop() is called or an error occurs."""
        if self.current_state is None:
            self.logger.log(LogLevel.ERROR, "Traffic light not initialized")
            return
        self.logger.log(LogLevel.INFO, "Traffic light system starting")
        try:
            start = clock()
            while not self._stop.is_set():
                if self.step(clock() - start):
                    start = clock()
                sleep(_TICK)
        except Exception as exc:
            self.logger.log(LogLevel.ERROR, f"Exception in traffic light: {exc}")
            self.change_state(ErrorState())
        finally:
            self._stop.clear()

    def stop(self) -> None:
        """Ask a running loop to finish after its current tick."""
        self._stop.set()