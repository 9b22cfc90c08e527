"""Graphics cards found under the kernel's DRM class directory."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwreport.filesystem import exists
from hwreport.pci import PCIMapper, get_mapper

DRM_ROOT = "/sys/class/drm"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GPU:
    """One graphics card. Unknown sizes and frequencies are 0."""

    id: int = 0
    vendor: str = ""
    name: str = ""
    driver_version: str = ""
    memory_bytes: int = 0
    frequency_mhz: int = 0
    num_cores: int = 0
    vendor_id: str = ""
    device_id: str = ""


def read_drm_by_path(path: str | os.PathLike[str]) -> str:
    """Return the first line of ``path``, or "" if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            line = stream.readline()
    except OSError:
        return ""
    return line[:-1] if line.endswith("\n") else line


def get_frequencies(drm_path: str | os.PathLike[str]) -> list[int]:
    """Return ``[min, current, max]`` GPU frequencies in MHz read from ``drm_path``.

    Any value that cannot be read marks the first entry as -1; the unread
    entry itself stays 0.
    """
    frequencies = [0, 0, 0]
    names = ("gt_min_freq_mhz", "gt_cur_freq_mhz", "gt_max_freq_mhz")
    for position, name in enumerate(names):
        match = _LEADING_INT.match(read_drm_by_path(os.path.join(drm_path, name)))
        if match is None:
            frequencies[0] = -1
        else:
            frequencies[position] = int(match.group(1))
    return frequencies


def get_all_gpus(
    drm_root: str | os.PathLike[str] = DRM_ROOT,
    mapper: PCIMapper | None = None,
) -> list[GPU]:
    """Return the cards ``card0``, ``card1``, ... found below ``drm_root``.

    Cards 0 to 3 are always probed; after that probing stops at the first
    missing card. Vendor and device names come from ``mapper``, which
    defaults to :func:`hwreport.pci.get_mapper`.
    """
    if mapper is None:
        mapper = get_mapper()
    gpus: list[GPU] = []
    card_id = 0
    while True:
        path = os.path.join(drm_root, f"card{card_id}")
        if not exists(path):
            if card_id > 2:
                break
            card_id += 1
            continue
        vendor_id = read_drm_by_path(os.path.join(path, "device", "vendor"))
        device_id = read_drm_by_path(os.path.join(path, "device", "device"))
        if vendor_id and device_id:
            vendor = mapper[vendor_id]
            gpus.append(
                GPU(
                    id=card_id,
                    vendor=vendor.vendor_name,
                    name=vendor[device_id].device_name,
                    frequency_mhz=get_frequencies(path)[2],
                    vendor_id=vendor_id,
                    device_id=device_id,
                )
            )
        card_id += 1
    return gpus