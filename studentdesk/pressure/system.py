"""The pressure detector: all state machines run from one super loop."""

from __future__ import annotations

from itertools import count

from .gpio import GpioPort
from .machines import AlarmManager, Buzzer, Led, MainController, PressureSensor


class PressureSystem:
    """Wires the sensor, controller, alarm and outputs to one GPIO port."""

    def __init__(self, port: GpioPort | None = None) -> None:
        self.port = port if port is not None else GpioPort()
        self.port.initialize()
        self.led = Led(self.port)
        self.buzzer = Buzzer(self.port)
        self.alarm = AlarmManager(self.led, self.buzzer)
        self.controller = MainController(self.alarm)
        self.sensor = PressureSensor(self.port, self.controller)

    def tick(self) -> None:
        """Run one pass of the super loop."""
        self.sensor.step()
        self.controller.step()
        self.alarm.step()
        self.buzzer.step()
        self.led.step()

    def run(self, cycles: int | None = None) -> int:
        """Run ``cycles`` passes, or forever when ``cycles`` is None; return passes run."""
        if cycles is None:
            for _ in count():
                self.tick()
        if cycles < 0:
            raise ValueError("cycles must not be negative")
        for _ in range(cycles):
            self.tick()
        return cycles