"""Traffic light finite-state machine with a console simulator and a crossroad view."""

__version__ = "1.0.0"