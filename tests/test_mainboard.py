import pytest

from hwreport.mainboard import MainBoard, get_dmi_by_name, read_mainboard


@pytest.fixture
def candidates(tmp_path):
    first = tmp_path / "virtual"
    second = tmp_path / "class"
    (first / "id").mkdir(parents=True)
    (second / "id").mkdir(parents=True)
    return first, second


def test_reads_first_candidate(candidates):
    first, second = candidates
    (first / "id" / "board_name").write_text("Board One\n")
    (second / "id" / "board_name").write_text("Board Two\n")
    assert get_dmi_by_name("board_name", candidates) == "Board One"


def test_empty_value_falls_through(candidates):
    first, second = candidates
    (first / "id" / "board_vendor").write_text("\n")
    (second / "id" / "board_vendor").write_text("Example Vendor\n")
    assert get_dmi_by_name("board_vendor", candidates) == "Example Vendor"


def test_missing_everywhere_is_unknown(candidates):
    assert get_dmi_by_name("board_serial", candidates) == "<unknown>"


def test_read_mainboard(candidates):
    first, _ = candidates
    (first / "id" / "board_vendor").write_text("Example Vendor\n")
    (first / "id" / "board_name").write_text("Example Board\n")
    (first / "id" / "board_version").write_text("Rev 1.0\n")
    board = read_mainboard(candidates)
    assert board == MainBoard(
        vendor="Example Vendor",
        name="Example Board",
        version="Rev 1.0",
        serial_number="<unknown>",
    )