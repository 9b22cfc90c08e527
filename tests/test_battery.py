import math

import pytest

from hwreport.battery import Battery, get_all_batteries


@pytest.fixture
def supply(tmp_path):
    bat = tmp_path / "BAT0"
    bat.mkdir()
    (bat / "manufacturer").write_text("ExampleCells\n")
    (bat / "model_name").write_text("Model X1\n")
    (bat / "serial_number").write_text("SN-PLACEHOLDER\n")
    (bat / "technology").write_text("Li-ion\n")
    (bat / "energy_full").write_text("50000\n")
    (bat / "energy_now").write_text("25000\n")
    (bat / "status").write_text("Charging\n")
    return tmp_path


def test_text_attributes(supply):
    battery = Battery(0, supply)
    assert battery.vendor() == "ExampleCells"
    assert battery.model() == "Model X1"
    assert battery.serial_number() == "SN-PLACEHOLDER"
    assert battery.technology() == "Li-ion"


def test_missing_file_is_unknown(supply):
    (supply / "BAT0" / "technology").unlink()
    assert Battery(0, supply).technology() == "<unknown>"


def test_negative_id_is_unknown(supply):
    battery = Battery(-1, supply)
    assert battery.vendor() == "<unknown>"
    assert battery.energy_full() == 0
    assert battery.charging() is False


def test_vendor_is_cached(supply):
    battery = Battery(0, supply)
    first = battery.vendor()
    (supply / "BAT0" / "manufacturer").write_text("Other\n")
    assert battery.vendor() == first


def test_energy_values(supply):
    battery = Battery(0, supply)
    assert battery.energy_full() == 50000
    assert battery.energy_now() == 25000


def test_invalid_energy_is_zero(supply):
    (supply / "BAT0" / "energy_now").write_text("n/a\n")
    assert Battery(0, supply).energy_now() == 0


def test_capacity_is_ratio(supply):
    battery = Battery(0, supply)
    assert battery.capacity() * battery.energy_full() == pytest.approx(battery.energy_now())


def test_capacity_without_energy_is_nan(tmp_path):
    (tmp_path / "BAT0").mkdir()
    battery = Battery(0, tmp_path)
    assert battery.energy_full() == 0
    assert battery.energy_now() == 0
    capacity = battery.capacity()
    assert math.isnan(capacity) is True


def test_charging_status(supply):
    battery = Battery(0, supply)
    assert battery.charging() is True
    assert battery.discharging() is False
    (supply / "BAT0" / "status").write_text("Discharging\n")
    assert battery.charging() is False
    assert battery.discharging() is True


def test_get_all_batteries_stops_at_gap(tmp_path):
    for name in ("BAT0", "BAT1", "BAT3"):
        (tmp_path / name).mkdir()
    assert [battery.id for battery in get_all_batteries(tmp_path)] == [0, 1]


def test_get_all_batteries_none(tmp_path):
    assert get_all_batteries(tmp_path) == []