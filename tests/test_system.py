import pytest

from studentdesk.pressure.gpio import GpioPort
from studentdesk.pressure.machines import AlarmState, ControlState, SensorState
from studentdesk.pressure.system import PressureSystem


def test_construction_initializes_port():
    port = GpioPort()
    system = PressureSystem(port)
    assert system.port is port
    assert port.crh == 0x22222222


def test_first_tick_only_initializes():
    system = PressureSystem()
    system.port.set_input(30)
    system.tick()
    assert system.port.reads == 0
    assert system.sensor.state is SensorState.INIT
    assert system.controller.state is ControlState.INIT


def test_high_pressure_alternates_alarm_state():
    system = PressureSystem()
    system.port.set_input(30)
    system.run(2)
    assert system.controller.pressure == 30
    assert system.alarm.state is AlarmState.ON
    system.tick()
    assert system.alarm.state is AlarmState.OFF
    system.tick()
    assert system.alarm.state is AlarmState.ON


def test_low_pressure_keeps_alarm_off():
    system = PressureSystem()
    system.port.set_input(5)
    system.run(6)
    assert system.alarm.state is AlarmState.OFF
    assert system.port.alarm_active() is False


def test_run_returns_cycles_and_reads_each_update():
    system = PressureSystem()
    assert system.run(4) == 4
    assert system.port.reads == 3


def test_run_rejects_negative_cycles():
    system = PressureSystem()
    with pytest.raises(ValueError):
        system.run(-1)