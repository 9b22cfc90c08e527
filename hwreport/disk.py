"""Block devices found under the kernel's block class directory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from hwreport.filesystem import exists, get_directory_entries
from hwreport.stringutils import strip

BLOCK_PATH = "/sys/class/block/"
UNKNOWN = "<unknown>"


@dataclass
class Disk:
    """One disk. The size is not determined and stays -1."""

    vendor: str = ""
    model: str = ""
    serial_number: str = ""
    size_bytes: int = -1
    id: int = -1


def _read_attribute(path: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            line = stream.readline()
    except OSError:
        return UNKNOWN
    return strip(line[:-1] if line.endswith("\n") else line)


def get_all_disks(base_path: str | os.PathLike[str] = BLOCK_PATH) -> list[Disk]:
    """Return a :class:`Disk` for every entry of ``base_path`` that has a device directory."""
    disks = []
    for entry in get_directory_entries(base_path):
        device = os.path.join(base_path, entry, "device")
        if not exists(device):
            continue
        disks.append(
            Disk(
                vendor=_read_attribute(os.path.join(device, "vendor")),
                model=_read_attribute(os.path.join(device, "model")),
                serial_number=_read_attribute(os.path.join(device, "serial")),
            )
        )
    return disks