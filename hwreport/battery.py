"""Batteries read from the kernel's power-supply class directory."""

from __future__ import annotations

import math
import os
import re

from hwreport.filesystem import exists

POWER_SUPPLY_PATH = "/sys/class/power_supply/"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_first_line(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            line = stream.readline()
    except OSError:
        return None
    return line[:-1] if line.endswith("\n") else line


class Battery:
    """A battery ``BAT<id>``; text attributes are read once and then kept."""

    def __init__(self, id: int = 0, base_path: str | os.PathLike[str] = POWER_SUPPLY_PATH) -> None:
        self.id = id
        self.base_path = os.fspath(base_path)
        self._vendor = ""
        self._model = ""
        self._serial_number = ""
        self._technology = ""
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r}, base_path={self.base_path!r})"

    def _read(self, name: str) -> str | None:
        if self.id < 0:
            return None
        return _read_first_line(os.path.join(self.base_path, f"BAT{self.id}", name))

    def _read_text(self, name: str) -> str:
        value = self._read(name)
        return UNKNOWN if value is None else value

    def _read_int(self, name: str) -> int:
        value = self._read(name)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def vendor(self) -> str:
        """Return the manufacturer."""
        if not self._vendor:
            self._vendor = self._read_text("manufacturer")
        return self._vendor

    def model(self) -> str:
        """Return the model name."""
        if not self._model:
            self._model = self._read_text("model_name")
        return self._model

    def serial_number(self) -> str:
        """Return the serial number."""
        if not self._serial_number:
            self._serial_number = self._read_text("serial_number")
        return self._serial_number

    def technology(self) -> str:
        """Return the cell technology."""
        if not self._technology:
            self._technology = self._read_text("technology")
        return self._technology

    def energy_full(self) -> int:
        """Return the energy when fully charged, 0 if unknown."""
        if self._energy_full == 0:
            self._energy_full = self._read_int("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Return the energy stored right now, 0 if unknown."""
        return self._read_int("energy_now")

    def capacity(self) -> float:
        """Return the charge level as a fraction of :meth:`energy_full`."""
        now, full = self.energy_now(), self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full

    def charging(self) -> bool:
        """Return whether the battery reports that it is charging."""
        return self._read("status") == "Charging"

    def discharging(self) -> bool:
        """Return whether the battery is not charging."""
        return not self.charging()


def get_all_batteries(base_path: str | os.PathLike[str] = POWER_SUPPLY_PATH) -> list[Battery]:
    """Return the batteries ``BAT0``, ``BAT1``, ... up to the first missing one."""
    batteries = []
    battery_id = 0
    while exists(os.path.join(base_path, f"BAT{battery_id}")):
        batteries.append(Battery(battery_id, base_path))
        battery_id += 1
    return batteries