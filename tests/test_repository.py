from pathlib import Path

import pendulum
import pytest

from track.errors import MalformedLineError, MalformedTimestampError, StoreIoError
from track.model.entry import Entry, Log, Quantity
from track.repository.entry import EntryRepository, append_entry, load_entries

RUN = Entry(pendulum.datetime(2026, 10, 18, 7, 0, tz="UTC"), "run", Quantity(5.0, "km"))
CODING = Entry(
    pendulum.datetime(2026, 10, 19, 9, 0, tz="UTC"), "work:coding", Log("parser")
)


def test_load_creates_missing_file(tmp_path: Path) -> None:
    track_file = tmp_path / "nested" / "dir" / ".track"

    assert load_entries(track_file) == []
    assert track_file.is_file()
    assert track_file.read_text() == ""


def test_load_keeps_file_order_and_skips_blank_lines(track_file: Path) -> None:
    track_file.write_text(
        "[2026-10-19T09:00:00+00:00] work:coding:parser\n"
        "\n"
        "[2026-10-18T07:00:00+00:00] run:5km\n"
        "\n"
    )

    entries = load_entries(track_file)

    assert [entry.category for entry in entries] == ["work:coding", "run"]
    assert entries[1].value == Quantity(5.0, "km")


def test_load_accepts_windows_line_endings(track_file: Path) -> None:
    track_file.write_bytes(b"[2026-10-18T07:00:00+00:00] run:5km\r\n")

    assert load_entries(track_file) == [RUN]


def test_load_fails_fast_on_malformed_line(track_file: Path) -> None:
    track_file.write_text(
        "[2026-10-18T07:00:00+00:00] run:5km\n"
        "[2026-10-19T09:00:00+00:00 work:coding\n"
        "[2026-10-19T10:00:00+00:00] run:3km\n"
    )

    with pytest.raises(MalformedLineError) as excinfo:
        load_entries(track_file)

    assert excinfo.value.line == "[2026-10-19T09:00:00+00:00 work:coding"
    assert excinfo.value.line_number == 2
    assert "line 2" in str(excinfo.value)


def test_load_reports_malformed_timestamp_line(track_file: Path) -> None:
    track_file.write_text("[last tuesday] run:5km\n")

    with pytest.raises(MalformedTimestampError) as excinfo:
        load_entries(track_file)

    assert excinfo.value.line == "[last tuesday] run:5km"
    assert excinfo.value.line_number == 1


def test_append_writes_one_line_per_entry(track_file: Path) -> None:
    track_file.touch()

    append_entry(track_file, RUN)
    append_entry(track_file, CODING)

    assert track_file.read_text() == (
        "[2026-10-18T07:00:00+00:00] run:5.0km\n"
        "[2026-10-19T09:00:00+00:00] work:coding:parser\n"
    )
    assert load_entries(track_file) == [RUN, CODING]


def test_load_directory_raises_store_error(tmp_path: Path) -> None:
    with pytest.raises(StoreIoError):
        load_entries(tmp_path)


def test_append_to_directory_raises_store_error(tmp_path: Path) -> None:
    with pytest.raises(StoreIoError):
        append_entry(tmp_path, RUN)


def test_repository_writes_through(track_file: Path) -> None:
    repository = EntryRepository(track_file)
    assert repository.entries == []

    repository.save_new_entry(RUN)

    assert repository.entries == [RUN]
    assert EntryRepository(track_file).get_all_entries() == [RUN]


def test_repository_creates_file_on_first_save(tmp_path: Path) -> None:
    track_file = tmp_path / "missing" / ".track"

    EntryRepository(track_file).save_new_entry(CODING)

    assert load_entries(track_file) == [CODING]


def test_get_all_entries_returns_a_copy(track_file: Path) -> None:
    repository = EntryRepository(track_file)
    repository.save_new_entry(RUN)

    entries = repository.get_all_entries()
    entries.clear()

    assert repository.entries == [RUN]


def test_unit_starting_with_a_point_reloads(track_file: Path) -> None:
    entry = Entry(
        pendulum.datetime(2026, 10, 19, 9, 0, tz="UTC"), "run", Quantity(5.0, " .5km")
    )

    append_entry(track_file, entry)

    assert load_entries(track_file) == [entry]
