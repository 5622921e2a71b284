import pytest

from oddments.logbench import append_records, fill_mapped, parse_record_size


@pytest.mark.parametrize(
    "argv, expected", [([], 100), (["64"], 64), (["a", "b"], 100)]
)
def test_parse_record_size(argv, expected):
    assert parse_record_size(argv) == expected


def test_append_records_appends(tmp_path):
    log = tmp_path / "test.log"
    assert append_records(log, 16, 3) == 3
    append_records(log, 16, 2)
    data = log.read_bytes()
    assert len(data) == 16 * 5
    assert set(data) == {0}


def test_append_rejects_bad_size(tmp_path):
    with pytest.raises(ValueError):
        append_records(tmp_path / "test.log", 0, 1)


def test_fill_mapped(tmp_path):
    log = tmp_path / "test.log"
    log.write_bytes(b"x" * 1000)
    copied = fill_mapped(log, 100, 1000)
    data = log.read_bytes()
    assert copied == 9
    assert len(data) == 1000
    assert data[:900] == bytes(900)
    assert data[900:] == b"x" * 100


def test_fill_mapped_creates_file(tmp_path):
    log = tmp_path / "new.log"
    fill_mapped(log, 10, 50)
    assert log.stat().st_size == 50


def test_fill_mapped_rejects_bad_size(tmp_path):
    with pytest.raises(ValueError):
        fill_mapped(tmp_path / "test.log", 10, 0)