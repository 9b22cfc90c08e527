"""Lookup of PCI vendor and device names from a ``pci.ids`` database."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from pathlib import Path

_INVALID_ID = "0000"
_INVALID_NAME = "invalid"


def _strip_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


def _parse_entry(line: str) -> tuple[str, str] | None:
    parts = line.strip(" \t\n").split("  ")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


@dataclass
class PCIDevice:
    """A PCI device with its subsystems, keyed by subsystem id."""

    device_id: str
    device_name: str
    subsystems: dict[str, str] = field(default_factory=dict)


@dataclass
class PCIVendor:
    """A PCI vendor and its devices, keyed by device id."""

    vendor_id: str
    vendor_name: str
    devices: dict[str, PCIDevice] = field(default_factory=dict)

    def __getitem__(self, device_id: str) -> PCIDevice:
        """Return the device for ``device_id`` (an optional ``0x`` prefix is ignored).

        Unknown ids give a placeholder device named "invalid".
        """
        device = self.devices.get(_strip_hex_prefix(device_id))
        if device is None:
            return PCIDevice(_INVALID_ID, _INVALID_NAME)
        return device


class PCIMapper:
    """Vendors and devices read from a ``pci.ids`` file."""

    def __init__(self, pci_ids_file: str | os.PathLike[str]) -> None:
        self._vendors: dict[str, PCIVendor] = {}
        with open(pci_ids_file, encoding="utf-8", errors="replace", newline="") as stream:
            self._parse(line.rstrip("\n") for line in stream)

    def _parse(self, lines) -> None:
        vendor: PCIVendor | None = None
        device: PCIDevice | None = None
        for line in lines:
            if not line or line.startswith("#"):
                continue
            entry = _parse_entry(line)
            if line.startswith("\t\t"):
                if entry is not None and device is not None:
                    device.subsystems.setdefault(*entry)
            elif line.startswith("\t"):
                if entry is not None and vendor is not None:
                    device = vendor.devices.setdefault(entry[0], PCIDevice(*entry))
            elif entry is not None:
                vendor = self._vendors.setdefault(entry[0], PCIVendor(*entry))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor for ``vendor_id`` (an optional ``0x`` prefix is ignored).

        Unknown ids give a placeholder vendor named "invalid".
        """
        vendor = self._vendors.get(_strip_hex_prefix(vendor_id))
        if vendor is None:
            return PCIVendor(_INVALID_ID, _INVALID_NAME)
        return vendor

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)


@functools.lru_cache(maxsize=None)
def _load_mapper(path: str) -> PCIMapper:
    return PCIMapper(path)


def get_mapper(home: str | os.PathLike[str] | None = None) -> PCIMapper:
    """Return the mapper for ``<home>/.hwinfo/pci.ids``, loading it once per path.

    ``home`` defaults to the ``HOME`` environment variable.
    """
    if home is None:
        home = os.environ["HOME"]
    return _load_mapper(str(Path(home) / ".hwinfo" / "pci.ids"))