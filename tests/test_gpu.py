from pathlib import Path

import pytest

from hwreport.gpu import GPU, get_all_gpus, get_frequencies, read_drm_by_path
from hwreport.pci import PCIMapper


@pytest.fixture
def mapper(tmp_path):
    ids = tmp_path / "pci.ids"
    ids.write_text("# comment\n8086  Intel Corporation\n\t1234  Test Graphics\n")
    return PCIMapper(ids)


def _make_card(root: Path, card_id: int, vendor="0x8086", device="0x1234", freqs=None) -> Path:
    card = root / f"card{card_id}"
    (card / "device").mkdir(parents=True)
    (card / "device" / "vendor").write_text(vendor + "\n")
    (card / "device" / "device").write_text(device + "\n")
    for name, value in (freqs or {}).items():
        (card / name).write_text(value + "\n")
    return card


def test_read_drm_by_path_reads_first_line(tmp_path):
    target = tmp_path / "value"
    target.write_text("first\nsecond\n")
    assert read_drm_by_path(target) == "first"


def test_read_drm_by_path_missing_file(tmp_path):
    assert read_drm_by_path(tmp_path / "missing") == ""


def test_get_frequencies_reads_all_three(tmp_path):
    (tmp_path / "gt_min_freq_mhz").write_text("300\n")
    (tmp_path / "gt_cur_freq_mhz").write_text("650\n")
    (tmp_path / "gt_max_freq_mhz").write_text("1200\n")
    assert get_frequencies(tmp_path) == [300, 650, 1200]


def test_get_frequencies_missing_values_mark_first_entry(tmp_path):
    (tmp_path / "gt_max_freq_mhz").write_text("1200\n")
    assert get_frequencies(tmp_path) == [-1, 0, 1200]


def test_get_all_gpus_resolves_names(tmp_path, mapper):
    drm = tmp_path / "drm"
    _make_card(drm, 0, freqs={"gt_max_freq_mhz": "1200"})
    gpus = get_all_gpus(drm, mapper)
    assert len(gpus) == 1
    gpu = gpus[0]
    assert gpu.id == 0
    assert gpu.vendor == "Intel Corporation"
    assert gpu.name == "Test Graphics"
    assert gpu.frequency_mhz == 1200
    assert (gpu.vendor_id, gpu.device_id) == ("0x8086", "0x1234")


def test_get_all_gpus_skips_gaps_among_first_cards(tmp_path, mapper):
    drm = tmp_path / "drm"
    _make_card(drm, 2)
    assert [gpu.id for gpu in get_all_gpus(drm, mapper)] == [2]


def test_get_all_gpus_stops_after_gap_beyond_third(tmp_path, mapper):
    drm = tmp_path / "drm"
    _make_card(drm, 0)
    _make_card(drm, 5)
    assert [gpu.id for gpu in get_all_gpus(drm, mapper)] == [0]


def test_get_all_gpus_skips_card_without_ids(tmp_path, mapper):
    drm = tmp_path / "drm"
    _make_card(drm, 0, vendor="")
    _make_card(drm, 1)
    assert [gpu.id for gpu in get_all_gpus(drm, mapper)] == [1]


def test_unknown_vendor_is_invalid(tmp_path, mapper):
    drm = tmp_path / "drm"
    _make_card(drm, 0, vendor="0xabcd")
    gpu = get_all_gpus(drm, mapper)[0]
    assert gpu.vendor == "invalid"
    assert gpu.name == "invalid"


def test_gpu_defaults():
    gpu = GPU()
    assert (gpu.memory_bytes, gpu.frequency_mhz, gpu.num_cores, gpu.driver_version) == (0, 0, 0, "")