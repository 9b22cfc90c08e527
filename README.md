# hwreport

`hwreport` reads hardware and system information on Linux from `/proc`, `/sys` and `/etc/os-release`. It covers CPU sockets, the operating system, GPUs, memory, the main board, batteries and block devices. You can use it as a library or print a plain-text report from the command line. It needs only the standard library.

## Installation

```
pip install hwreport
```

To install the test dependencies as well, use `pip install hwreport[test]`.

## Command line

```
hwreport
```

This prints a report with one section for each kind of component: CPU, OS, GPU, RAM, Main Board, Batteries and Disks. When a value cannot be found, the report shows `<unknown>`, `-1` or `0`. The command accepts no options other than `--help`.

The report needs the PCI id database at `~/.hwinfo/pci.ids` (see "GPU names" below). If that file cannot be read, the command prints an error to standard error and exits with status 1.

Before the per-thread CPU utilisation is printed, the command waits for one second so that it has two samples to compare.

## Library

```python
from hwreport.battery import get_all_batteries
from hwreport.cpu import get_all_cpus
from hwreport.disk import get_all_disks
from hwreport.mainboard import read_mainboard
from hwreport.osinfo import detect_os
from hwreport.ram import RAM

for cpu in get_all_cpus():
    print(cpu.id, cpu.vendor, cpu.model_name, cpu.num_logical_cores)
    print(cpu.max_clock_speed_mhz, cpu.l3_cache_size_bytes)
    print(cpu.current_clock_speed_mhz())  # one value in MHz per logical CPU
    print(cpu.threads_utilisation())      # waits one second on first use

ram = RAM()
print(ram.total_bytes, ram.free_bytes(), ram.available_bytes())

for battery in get_all_batteries():
    print(battery.vendor(), battery.capacity(), battery.charging())

for disk in get_all_disks():
    print(disk.vendor, disk.model, disk.serial_number)

os_info = detect_os()
print(os_info.name, os_info.version, os_info.kernel, os_info.is_64bit)

board = read_mainboard()
print(board.vendor, board.name, board.version, board.serial_number)
```

Each lookup function takes the paths it reads from as parameters, with the system paths as defaults. For example, you can call `get_all_cpus(cpuinfo_path, sysfs_root, stat_path)`, `get_all_batteries(base_path)`, `get_all_disks(base_path)`, `get_all_gpus(drm_root, mapper)`, `read_mainboard(candidates)`, `detect_os(os_release_path, loader_path)` or `RAM(meminfo_path)`. This lets you run them against a captured copy of `/proc` or `/sys`.

Some details of what the functions return:

- `get_all_cpus` returns one `CPU` per physical socket in `/proc/cpuinfo`. The cache size found there is stored as `l3_cache_size_bytes`. The L1 and L2 sizes stay `-1`.
- `CPU.current_utilisation()` and `CPU.thread_utilisation(index)` return the share of working time since the previous call, as a number between 0 and 1, or `-1.0` when no valid share can be computed. A thread index outside `num_logical_cores` raises `IndexError`.
- `parse_meminfo(path)` returns a `MemInfo` with `total`, `free` and `available` in bytes. If the file cannot be read, or lacks total or available memory, the values come from `os.sysconf` instead.
- `get_all_batteries` returns `BAT0`, `BAT1` and so on, up to the first battery that is missing. `Battery.capacity()` is `energy_now() / energy_full()`.
- `detect_os` treats the system as 64-bit when `/lib64/ld-linux-x86-64.so.2` exists. The byte order comes from `sys.byteorder`.

### GPU names

`get_all_gpus()` looks at `/sys/class/drm/card*`. It turns PCI vendor and device ids into names using a `pci.ids` database, loaded by `hwreport.pci.get_mapper(home)` from `<home>/.hwinfo/pci.ids`. The `home` directory defaults to `$HOME`. You can also load a database yourself and pass it in:

```python
from hwreport.gpu import get_all_gpus
from hwreport.pci import PCIMapper

mapper = PCIMapper("/usr/share/hwdata/pci.ids")
vendor = mapper["0x8086"]
print(vendor.vendor_name, vendor["0x1234"].device_name)

for gpu in get_all_gpus(mapper=mapper):
    print(gpu.id, gpu.vendor, gpu.name, gpu.frequency_mhz)
```

An id that is not in the database gives an entry named `invalid`. A leading `0x` on an id is ignored.

### Building a report

`hwreport.report.render_report(cpus, os_info, gpus, ram, mainboard, batteries, disks)` takes data you have already collected and returns the report as a string.

### Helpers

- `hwreport.filesystem` reads single values and `/proc/stat` jiffies: `get_specs_by_file_path`, `get_jiffies`, `exists` and `get_directory_entries`.
- `hwreport.stringutils` holds the small parsing helpers used by the other modules.

## What it does not do

- It reads Linux interfaces only. On other systems most values come back as unknown or empty.
- Disk sizes are not determined. `Disk.size_bytes` stays `-1` and `Disk.id` stays `-1`.
- A GPU's driver version, memory size and core count are not determined. They stay `""` and `0`.
- Memory vendor, model, name, serial number and frequency are not read. They are `<unknown>` and `-1`.
- CPU temperatures are not read.
- The Main Board section of the report prints the memory serial number, not `MainBoard.serial_number`.