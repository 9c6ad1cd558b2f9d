"""Asyncio driver for 25-series SPI flash and EEPROM chips, with its errors and interfaces."""

__version__ = "0.1.0"

__all__ = ["errors", "interfaces", "series25"]