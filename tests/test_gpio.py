import pytest

from studentdesk.pressure.gpio import ALARM_PIN, GpioPort


def test_initialize_enables_clock_and_configures_pins():
    port = GpioPort()
    port.initialize()
    assert (port.apb2enr >> 2) & 1 == 1
    assert port.crh == 0x22222222
    assert port.crl == 0


def test_initialize_keeps_unrelated_clock_bits():
    port = GpioPort()
    port.apb2enr = 1
    port.initialize()
    assert port.apb2enr == 0b101


def test_read_pressure_uses_low_byte_and_counts_reads():
    port = GpioPort()
    port.set_input(0x0100 + 42)
    assert port.read_pressure() == 42
    assert port.read_pressure() == 42
    assert port.reads == 2
    assert port.last_pressure == 42


def test_set_input_rejects_negative_values():
    port = GpioPort()
    with pytest.raises(ValueError):
        port.set_input(-1)


def test_alarm_actuator_toggles_only_its_pin():
    port = GpioPort()
    port.odr = 1
    port.set_alarm_actuator(True)
    assert port.alarm_active() is True
    assert port.odr == (1 << ALARM_PIN) | 1
    port.set_alarm_actuator(False)
    assert port.alarm_active() is False
    assert port.odr == 1