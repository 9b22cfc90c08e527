"""CPU sockets read from ``/proc/cpuinfo``, with clock speeds and utilisation."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field

from hwreport.filesystem import Jiffies, get_jiffies, get_specs_by_file_path
from hwreport.stringutils import split, split_char, strip

SYSFS_CPU_ROOT = "/sys/devices/system/cpu"
CPUINFO_PATH = "/proc/cpuinfo"
STAT_PATH = "/proc/stat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _khz_to_mhz(value: int) -> int:
    quotient = abs(value) // 1000
    return quotient if value >= 0 else -quotient


def _cpufreq_path(sysfs_root: str | os.PathLike[str], core_id: int, name: str) -> str:
    return os.path.join(sysfs_root, f"cpu{core_id}", "cpufreq", name)


def _read_cpufreq_mhz(core_id: int, sysfs_root: str | os.PathLike[str], name: str) -> int:
    value = get_specs_by_file_path(_cpufreq_path(sysfs_root, core_id, name))
    if value > -1:
        return _khz_to_mhz(value)
    return -1


def get_max_clock_speed_mhz(core_id: int, sysfs_root: str | os.PathLike[str] = SYSFS_CPU_ROOT) -> int:
    """Return the maximum scaling frequency of ``core_id`` in MHz, or -1."""
    return _read_cpufreq_mhz(core_id, sysfs_root, "scaling_max_freq")


def get_regular_clock_speed_mhz(core_id: int, sysfs_root: str | os.PathLike[str] = SYSFS_CPU_ROOT) -> int:
    """Return the base frequency of ``core_id`` in MHz, or -1."""
    return _read_cpufreq_mhz(core_id, sysfs_root, "base_frequency")


def get_min_clock_speed_mhz(core_id: int, sysfs_root: str | os.PathLike[str] = SYSFS_CPU_ROOT) -> int:
    """Return the minimum scaling frequency of ``core_id`` in MHz, or -1."""
    return _read_cpufreq_mhz(core_id, sysfs_root, "scaling_min_freq")


def _ratio(work: int, total: int) -> float:
    """Divide like a floating point division would, with nan and infinities."""
    if total == 0:
        if work == 0:
            return float("nan")
        return float("inf") if work > 0 else float("-inf")
    return work / total


@dataclass
class CPU:
    """One CPU socket. Unknown numeric values are -1."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    sysfs_root: str = field(default=SYSFS_CPU_ROOT, repr=False, compare=False)
    stat_path: str = field(default=STAT_PATH, repr=False, compare=False)
    _jiffies_initialized: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: list[Jiffies] | None = field(default=None, init=False, repr=False, compare=False)

    def current_clock_speed_mhz(self) -> list[int]:
        """Return the current frequency in MHz of every logical CPU that reports one."""
        speeds = []
        core_id = 0
        while True:
            frequency = get_specs_by_file_path(_cpufreq_path(self.sysfs_root, core_id, "scaling_cur_freq"))
            if frequency == -1:
                return speeds
            speeds.append(_khz_to_mhz(frequency))
            core_id += 1

    def init_jiffies(self) -> None:
        """Wait one second before the first utilisation sample so a delta exists."""
        if not self._jiffies_initialized:
            time.sleep(1.0)
            self._jiffies_initialized = True

    def current_utilisation(self) -> float:
        """Return the share of time spent working since the last call, or -1.0."""
        self.init_jiffies()
        current = get_jiffies(0, self.stat_path)
        last, self._last_total = self._last_total, current
        utilisation = _ratio(current.working - last.working, current.total - last.total)
        if utilisation != utilisation or not 0 <= utilisation <= 1:
            return -1.0
        return utilisation

    def thread_utilisation(self, thread_index: int) -> float:
        """Return the working share of logical CPU ``thread_index`` since its last sample, or -1.0."""
        self.init_jiffies()
        if self._last_threads is None:
            self._last_threads = [Jiffies() for _ in range(max(0, self.num_logical_cores))]
        if not 0 <= thread_index < len(self._last_threads):
            raise IndexError(f"thread index {thread_index} out of range")
        current = get_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads[thread_index]
        self._last_threads[thread_index] = current
        share = _ratio(current.working - last.working, current.total - last.total)
        if share != share or not 0 <= share <= 100:
            return -1.0
        return share

    def threads_utilisation(self) -> list[float]:
        """Return :meth:`thread_utilisation` for every logical CPU."""
        return [self.thread_utilisation(index) for index in range(max(0, self.num_logical_cores))]


def get_all_cpus(
    cpuinfo_path: str | os.PathLike[str] = CPUINFO_PATH,
    sysfs_root: str | os.PathLike[str] = SYSFS_CPU_ROOT,
    stat_path: str | os.PathLike[str] = STAT_PATH,
) -> list[CPU]:
    """Return one :class:`CPU` per physical socket listed in ``cpuinfo_path``."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace", newline="") as stream:
            content = stream.read()
    except OSError:
        return []

    cpus: list[CPU] = []
    physical_id = -1
    for block in split(content, "\n\n"):
        cpu = CPU(sysfs_root=str(sysfs_root), stat_path=str(stat_path))
        add = False
        for line in split_char(block, "\n"):
            pair = split(line, ":")
            if len(pair) < 2:
                continue
            name, value = strip(pair[0]), strip(pair[1])
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _parse_int(split(value, " ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _parse_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _parse_int(value)
            elif name == "flags":
                cpu.flags = split(value, " ")
            elif name == "physical id":
                socket_id = _parse_int(value)
                if socket_id == physical_id:
                    continue
                cpu.id = socket_id
                add = True
        if add:
            cpu.max_clock_speed_mhz = get_max_clock_speed_mhz(cpu.id, sysfs_root)
            cpu.regular_clock_speed_mhz = get_regular_clock_speed_mhz(cpu.id, sysfs_root)
            physical_id += 1
            cpus.append(cpu)
    return cpus