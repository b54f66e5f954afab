import pytest

from trafficfsm.logger import Logger, LogLevel
from trafficfsm.machine import (
    ErrorState,
    GreenState,
    RedState,
    Timing,
    TrafficLight,
    YellowState,
)


class Recorder(Logger):
    def __init__(self):
        self.records = []

    def log(self, level, message):
        self.records.append((level, message))

    def messages(self):
        return [message for _, message in self.records]


TIMING = Timing(green=5.0, yellow=2.0, red=3.0, min_green=2.0)


def make_light(timing=TIMING):
    light = TrafficLight(timing)
    recorder = Recorder()
    light.initialize(recorder)
    return light, recorder


def test_state_names():
    assert [str(s) for s in (RedState(), YellowState(), GreenState(), ErrorState())] == [
        "RED",
        "YELLOW",
        "GREEN",
        "ERROR",
    ]


def test_config_from_sequence():
    light = TrafficLight([5.0, 2.0, 3.0, 2.0])
    assert light.config == TIMING


def test_initialize_starts_red_without_logging():
    light, recorder = make_light()
    assert isinstance(light.current_state, RedState)
    assert recorder.records == []


def test_initialize_default_logger_writes_to_console(capsys):
    light = TrafficLight(TIMING)
    light.initialize(None)
    light.request_pedestrian()
    captured = capsys.readouterr().out
    assert captured.splitlines() == [
        "[INFO] Pedestrian request received (not in GREEN state)"
    ]


def test_invalid_config_enters_error():
    light, recorder = make_light(Timing(green=0.0, yellow=2.0, red=3.0, min_green=2.0))
    assert isinstance(light.current_state, ErrorState)
    assert recorder.records == [
        (LogLevel.ERROR, "Invalid traffic light configuration"),
        (LogLevel.ERROR, "Entering state: ERROR"),
    ]


def test_zero_min_green_is_allowed():
    light, recorder = make_light(Timing(green=5.0, yellow=2.0, red=3.0, min_green=0.0))
    assert recorder.records == []
    light.change_state(GreenState())
    light.request_pedestrian()
    assert light.step(0.0) is True
    assert str(light.current_state) == "YELLOW"


def test_red_waits_then_goes_green():
    light, recorder = make_light()
    assert light.step(TIMING.red - 1.0) is False
    assert isinstance(light.current_state, RedState)
    assert light.step(TIMING.red) is True
    assert isinstance(light.current_state, GreenState)
    assert recorder.messages() == ["Exiting state: RED", "Entering state: GREEN"]


def test_yellow_goes_red():
    light, _ = make_light()
    light.change_state(YellowState())
    assert light.step(TIMING.yellow - 0.5) is False
    assert light.step(TIMING.yellow) is True
    assert isinstance(light.current_state, RedState)


def test_green_full_duration_without_request():
    light, recorder = make_light()
    light.change_state(GreenState())
    assert light.step(TIMING.min_green) is False
    assert light.step(TIMING.green) is True
    assert isinstance(light.current_state, YellowState)
    assert "Pedestrian request acknowledged" not in recorder.messages()


def test_green_cut_short_by_pedestrian():
    light, recorder = make_light()
    light.change_state(GreenState())
    light.request_pedestrian()
    assert light.step(TIMING.min_green) is True
    assert isinstance(light.current_state, YellowState)
    assert "Pedestrian request acknowledged" in recorder.messages()


def test_pedestrian_request_before_min_green_waits():
    light, _ = make_light()
    light.change_state(GreenState())
    light.request_pedestrian()
    assert light.step(TIMING.min_green - 1.0) is False
    assert isinstance(light.current_state, GreenState)


def test_request_messages_depend_on_state():
    light, recorder = make_light()
    light.request_pedestrian()
    light.change_state(GreenState())
    light.request_pedestrian()
    messages = recorder.messages()
    assert messages[0] == "Pedestrian request received (not in GREEN state)"
    assert messages[-1] == "Pedestrian request received during GREEN state"
    assert light.pedestrian_requested is True


def test_error_state_logs_and_stays():
    light, recorder = make_light()
    light.change_state(ErrorState())
    assert light.step(100.0) is False
    assert isinstance(light.current_state, ErrorState)
    assert recorder.records[-1] == (LogLevel.ERROR, "Traffic light in ERROR state")


def test_error_state_exit_logs_error_level():
    light, recorder = make_light()
    light.change_state(ErrorState())
    light.change_state(RedState())
    assert (LogLevel.ERROR, "Exiting state: ERROR") in recorder.records
    assert recorder.records[-1] == (LogLevel.INFO, "Entering state: RED")


def test_step_without_initialize_raises():
    with pytest.raises(RuntimeError):
        TrafficLight(TIMING).step(0.0)


def test_run_without_initialize_logs_error():
    light = TrafficLight(TIMING)
    recorder = Recorder()
    light.logger = recorder
    light.run(clock=lambda: 0.0, sleep=lambda _: None)
    assert recorder.records == [(LogLevel.ERROR, "Traffic light not initialized")]


class FakeTime:
    def __init__(self, light, ticks):
        self.now = 0.0
        self.ticks = ticks
        self.light = light

    def clock(self):
        return self.now

    def sleep(self, _):
        self.now += 1.0
        self.ticks -= 1
        if self.ticks <= 0:
            self.light.stop()


def test_run_cycles_through_states():
    light, recorder = make_light()
    fake = FakeTime(light, 20)
    light.run(clock=fake.clock, sleep=fake.sleep)
    messages = recorder.messages()
    assert messages[0] == "Traffic light system starting"
    entered = [m.removeprefix("Entering state: ") for m in messages if m.startswith("Entering")]
    assert entered[:4] == ["GREEN", "YELLOW", "RED", "GREEN"]


def test_run_exception_enters_error_state():
    light, recorder = make_light()

    def failing_sleep(_):
        raise ValueError("boom")

    light.run(clock=lambda: 0.0, sleep=failing_sleep)
    assert isinstance(light.current_state, ErrorState)
    assert (LogLevel.ERROR, "Exception in traffic light: boom") in recorder.records


def test_stop_before_run_returns_immediately():
    light, recorder = make_light()
    light.stop()
    light.run(clock=lambda: 0.0, sleep=lambda _: None)
    assert recorder.messages() == ["Traffic light system starting"]
    assert isinstance(light.current_state, RedState)