"""Plain-text hardware report covering CPUs, OS, GPUs, memory, board, batteries and disks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from hwreport.battery import Battery, get_all_batteries
from hwreport.cpu import CPU, get_all_cpus
from hwreport.disk import Disk, get_all_disks
from hwreport.gpu import GPU, get_all_gpus
from hwreport.mainboard import MainBoard, read_mainboard
from hwreport.osinfo import OS, detect_os
from hwreport.ram import RAM
from hwreport.stringutils import get_value

_LABEL_WIDTH = 20
_MIB = 1024 * 1024

_CPU_RULE = "----------------------------------- CPU -----------------------------------"
_OS_RULE = "----------------------------------- OS ------------------------------------"
_GPU_RULE = "----------------------------------- GPU -----------------------------------"
_RAM_RULE = "----------------------------------- RAM -----------------------------------"
_BOARD_RULE = "------------------------------- Main Board --------------------------------"
_BATTERY_RULE = "------------------------------- Batteries ---------------------------------"
_DISK_RULE = "--------------------------------- Disks -----------------------------------"
_END_RULE = "---------------------------------------------------------------------------"


def _field(label: str, value: object) -> str:
    return f"{label:<{_LABEL_WIDTH}}{value}"


def _number(value: float) -> str:
    """Format a float with six significant digits, the way a stream prints doubles."""
    return f"{value:g}"


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _cpu_lines(cpus: Sequence[CPU]) -> list[str]:
    lines = [_CPU_RULE]
    for cpu in cpus:
        lines += [
            f"Socket {cpu.id}:",
            _field(" vendor:", cpu.vendor),
            _field(" model:", cpu.model_name),
            _field(" physical cores:", cpu.num_physical_cores),
            _field(" logical cores:", cpu.num_logical_cores),
            _field(" max frequency:", cpu.max_clock_speed_mhz),
            _field(" regular frequency:", cpu.regular_clock_speed_mhz),
            _field(
                " cache size (L1, L2, L3): ",
                f"{cpu.l1_cache_size_bytes}, {cpu.l2_cache_size_bytes}, {cpu.l3_cache_size_bytes}",
            ),
        ]
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speed_mhz()
        for thread_id, share in enumerate(utilisation):
            speed = get_value(speeds, thread_id, -1)
            lines.append(_field(f"   Thread {thread_id}: ", f"{speed} MHz ({_number(share * 100)}%)"))
    return lines


def _os_lines(os_info: OS) -> list[str]:
    return [
        _OS_RULE,
        _field("Operating System:", os_info.name),
        _field("version:", os_info.version),
        _field("kernel:", os_info.kernel),
        _field("architecture:", "32 bit" if os_info.is_32bit else "64 bit"),
        _field("endianess:", "little endian" if os_info.is_little_endian else "big endian"),
    ]


def _gpu_lines(gpus: Sequence[GPU]) -> list[str]:
    lines = [_GPU_RULE]
    for gpu in gpus:
        lines += [
            f"GPU {gpu.id}:",
            _field("  vendor:", gpu.vendor),
            _field("  model:", gpu.name),
            _field("  driverVersion:", gpu.driver_version),
            _field("  memory [MiB]:", _number(gpu.memory_bytes / _MIB)),
            _field("  frequency:", gpu.frequency_mhz),
            _field("  cores:", gpu.num_cores),
        ]
    return lines


def _ram_lines(ram: RAM) -> list[str]:
    return [
        _RAM_RULE,
        _field("vendor:", ram.vendor),
        _field("model:", ram.model),
        _field("name:", ram.name),
        _field("serial-number:", ram.serial_number),
        _field("size [MiB]:", _truncating_div(ram.total_bytes, _MIB)),
        _field("free [MiB]:", _truncating_div(ram.free_bytes(), _MIB)),
        _field("available [MiB]:", _truncating_div(ram.available_bytes(), _MIB)),
        _field("Frequency [MHz]:", _truncating_div(ram.frequency_hz, 1000 * 1000)),
    ]


def _mainboard_lines(mainboard: MainBoard, ram: RAM) -> list[str]:
    return [
        _BOARD_RULE,
        _field("vendor:", mainboard.vendor),
        _field("name:", mainboard.name),
        _field("version:", mainboard.version),
        # The board section reports the memory serial number.
        _field("serial-number:", ram.serial_number),
    ]


def _battery_lines(batteries: Sequence[Battery]) -> list[str]:
    lines = [_BATTERY_RULE]
    if not batteries:
        lines.append("No Batteries installed or detected")
        return lines
    for number, battery in enumerate(batteries):
        lines += [
            f"Battery {number}:",
            _field("  vendor:", battery.vendor()),
            _field("  model:", battery.model()),
            _field("  serial-number:", battery.serial_number()),
            _field("  charging:", "yes" if battery.charging() else "no"),
            _field("  capacity:", _number(battery.capacity())),
        ]
    lines.append(_END_RULE)
    return lines


def _disk_lines(disks: Sequence[Disk]) -> list[str]:
    lines = [_DISK_RULE]
    if not disks:
        lines.append("No Disks installed or detected")
        return lines
    for number, disk in enumerate(disks):
        lines += [
            f"Disk {number}:",
            _field("  vendor:", disk.vendor),
            _field("  model:", disk.model),
            _field("  serial-number:", disk.serial_number),
            _field("  size:", disk.size_bytes),
        ]
    lines.append(_END_RULE)
    return lines


def render_report(
    cpus: Sequence[CPU],
    os_info: OS,
    gpus: Sequence[GPU],
    ram: RAM,
    mainboard: MainBoard,
    batteries: Sequence[Battery],
    disks: Sequence[Disk],
) -> str:
    """Return the hardware report for the given components as text."""
    lines = ["Hardware Report:", ""]
    lines += _cpu_lines(cpus)
    lines += _os_lines(os_info)
    lines += _gpu_lines(gpus)
    lines += _ram_lines(ram)
    lines += _mainboard_lines(mainboard, ram)
    lines += _battery_lines(batteries)
    lines += _disk_lines(disks)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Gather hardware information from the running system and print the report."""
    parser = argparse.ArgumentParser(
        prog="hwreport",
        description="Print a report of the hardware and operating system of this machine.",
    )
    parser.parse_args(argv)

    cpus = get_all_cpus()
    os_info = detect_os()
    try:
        gpus = get_all_gpus()
    except OSError as exc:
        print(f"error: could not read the PCI id database: {exc}", file=sys.stderr)
        return 1
    ram = RAM()
    mainboard = read_mainboard()
    batteries = get_all_batteries()
    disks = get_all_disks()

    sys.stdout.write(render_report(cpus, os_info, gpus, ram, mainboard, batteries, disks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())