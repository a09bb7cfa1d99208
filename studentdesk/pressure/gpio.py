"""Simulated GPIO port A of the pressure detector board."""

from __future__ import annotations

GPIO_PORTA = 0x40010800
BASE_RCC = 0x40021000

APB2ENR_ADDRESS = BASE_RCC + 0x18
GPIOA_CRL_ADDRESS = GPIO_PORTA + 0x00
GPIOA_CRH_ADDRESS = GPIO_PORTA + 0x04
GPIOA_IDR_ADDRESS = GPIO_PORTA + 0x08
GPIOA_ODR_ADDRESS = GPIO_PORTA + 0x0C

IOPA_ENABLE_BIT = 2
ALARM_PIN = 13

_REGISTER_MASK = 0xFFFFFFFF
_PIN_CONFIG_MASK = 0xFF0FFFFF
_CRL_CONFIG = 0x00000000
_CRH_CONFIG = 0x22222222
_PRESSURE_MASK = 0xFF


class GpioPort:
    """Registers of GPIO port A: clock enable, configuration, input and output.

    The pressure sensor is read from the low byte of the input data register;
    the alarm actuator is driven by one pin of the output data register.
    """

    def __init__(self) -> None:
        self.apb2enr = 0
        self.crl = 0
        self.crh = 0
        self.idr = 0
        self.odr = 0
        self.reads = 0
        self.last_pressure = 0

    def initialize(self) -> None:
        """Enable the port clock and configure the pins."""
        self.apb2enr |= 1 << IOPA_ENABLE_BIT
        self.crl = (self.crl & _PIN_CONFIG_MASK) | _CRL_CONFIG
        self.crh = (self.crh & _PIN_CONFIG_MASK) | _CRH_CONFIG

    def read_pressure(self) -> int:
        """Return the pressure value on the low byte of the input register."""
        self.reads += 1
        self.last_pressure = self.idr & _PRESSURE_MASK
        return self.last_pressure

    def set_alarm_actuator(self, on: bool) -> None:
        """Drive the alarm pin high when ``on`` is true, low otherwise."""
        if on:
            self.odr |= 1 << ALARM_PIN
        else:
            self.odr &= ~(1 << ALARM_PIN) & _REGISTER_MASK

    def set_input(self, value: int) -> None:
        """Place ``value`` on the input data register, as the sensor would."""
        if value < 0:
            raise ValueError("register values are unsigned")
        self.idr = value & _REGISTER_MASK

    def alarm_active(self) -> bool:
        """Return True if the alarm pin is driven high."""
        return bool(self.odr & (1 << ALARM_PIN))