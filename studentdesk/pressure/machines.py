"""State machines of the pressure detector: sensor, controller, alarm and outputs."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

ALARM_TIME = 5000
DEFAULT_THRESHOLD = 20


class SensorState(Enum):
    INIT = "init"
    UPDATE = "update"


class ControlState(Enum):
    INIT = "init"
    UPDATE = "update"


class AlarmState(Enum):
    OFF = "off"
    ON = "on"


class OutputState(Enum):
    ON = "on"
    OFF = "off"


class _Actuator(Protocol):
    def set_alarm_actuator(self, on: bool) -> None: ...


class _PressureSource(Protocol):
    def read_pressure(self) -> int: ...


class _Output:
    """Output that applies its requested state to the actuator on each step."""

    def __init__(self, port: _Actuator) -> None:
        self._port = port
        self.state = OutputState.OFF
        self._pending = OutputState.OFF

    @property
    def pending(self) -> OutputState:
        """State that the next step will apply."""
        return self._pending

    def turn_on(self) -> None:
        """Request the output to switch on at the next step."""
        self._pending = OutputState.ON

    def turn_off(self) -> None:
        """Request the output to switch off at the next step."""
        self._pending = OutputState.OFF

    def step(self) -> None:
        """Enter the requested state and drive the actuator."""
        self.state = self._pending
        self._port.set_alarm_actuator(self.state is OutputState.ON)


class Buzzer(_Output):
    """Buzzer driver."""

    def __init__(self, port: _Actuator) -> None:
        super().__init__(port)

    def turn_on(self) -> None:
        """Request the buzzer to sound at the next step."""
        super().turn_on()

    def turn_off(self) -> None:
        """Request the buzzer to stop at the next step."""
        super().turn_off()

    def step(self) -> None:
        """Apply the requested buzzer state."""
        super().step()


class Led(_Output):
    """Warning LED driver."""

    def __init__(self, port: _Actuator) -> None:
        super().__init__(port)

    def turn_on(self) -> None:
        """Request the LED to light at the next step."""
        super().turn_on()

    def turn_off(self) -> None:
        """Request the LED to go dark at the next step."""
        super().turn_off()

    def step(self) -> None:
        """Apply the requested LED state."""
        super().step()


class AlarmManager:
    """Raises the alarm on high pressure and clears it once the alarm time elapses."""

    def __init__(self, led: Led, buzzer: Buzzer, alarm_time: int = ALARM_TIME) -> None:
        if alarm_time < 0:
            raise ValueError("alarm time must not be negative")
        self._led = led
        self._buzzer = buzzer
        self.alarm_time = alarm_time
        self.state = AlarmState.OFF
        self._pending = AlarmState.OFF
        self.remaining = 0

    @property
    def pending(self) -> AlarmState:
        """State that the next step will run."""
        return self._pending

    def on_high_pressure(self) -> None:
        """Start the alarm, unless it is already on."""
        if self.state is AlarmState.OFF:
            self._led.turn_on()
            self._buzzer.turn_on()
            self.remaining = self.alarm_time
            self._pending = AlarmState.ON

    def step(self) -> None:
        """Run the current alarm state."""
        if self._pending is AlarmState.OFF:
            self.state = AlarmState.OFF
            self._led.turn_off()
            self._buzzer.turn_off()
            return
        self.state = AlarmState.ON
        # The alarm time counts down within this step; rearm it for next time.
        self.remaining = self.alarm_time
        self._led.turn_off()
        self._buzzer.turn_off()
        self._pending = AlarmState.OFF


class MainController:
    """Compares the latest pressure reading with the threshold."""

    def __init__(self, alarm: AlarmManager, threshold: int = DEFAULT_THRESHOLD) -> None:
        self._alarm = alarm
        self.threshold = threshold
        self.pressure = 0
        self.state = ControlState.INIT
        self._pending = ControlState.INIT

    def read_pressure(self, value: int) -> None:
        """Store a new pressure reading."""
        self.pressure = value

    def step(self) -> None:
        """Run the current controller state."""
        self.state = self._pending
        if self.state is ControlState.INIT:
            self._pending = ControlState.UPDATE
        elif self.pressure > self.threshold:
            self._alarm.on_high_pressure()


class PressureSensor:
    """Reads the pressure from the port and reports it to the controller."""

    def __init__(self, port: _PressureSource, controller: MainController) -> None:
        self._port = port
        self._controller = controller
        self.state = SensorState.INIT
        self._pending = SensorState.INIT

    def step(self) -> None:
        """Run the current sensor state."""
        self.state = self._pending
        if self.state is SensorState.INIT:
            self._pending = SensorState.UPDATE
            return
        self._controller.read_pressure(int(self._port.read_pressure()))
        self._pending = SensorState.UPDATE