import io
from pathlib import Path

import pytest

from logstats.aggregate import AggregateState, CategoryStats
from logstats.errors import InputFileError, ReadError
from logstats.pipeline import aggregate_stream, process_file
from logstats.sample import generate_sample_log


def _write(path: Path, lines) -> Path:
    path.write_bytes(b"".join(lines))
    return path


def test_concrete_scenario(tmp_path):
    lines = [b'{"type":"A"}\n', b'{"type":"B","x":1}\n', b"not json\n", b'{"type":"A"}\n']
    state = process_file(_write(tmp_path / "small.log", lines))
    assert state.categories == {
        "A": CategoryStats(count=2, bytes=len(lines[0]) + len(lines[3])),
        "B": CategoryStats(count=1, bytes=len(lines[1])),
    }
    assert state.total_input_bytes == sum(len(line) for line in lines)
    assert state.counted_bytes <= state.total_input_bytes


def test_mixed_lines_only_count_valid_records(tmp_path):
    lines = [
        b'{"type":"A","n":1}\n',
        b'{"broken": \n',
        b'{"no_type":true}\n',
        b"\n",
        b'{"type":"B"}\r\n',
        b'{"type":"A"}',
    ]
    state = process_file(_write(tmp_path / "mixed.log", lines))
    assert state.lines_processed == 3
    assert state.categories["A"].bytes == len(lines[0]) + len(lines[5])
    assert state.categories["B"].bytes == len(lines[4])
    assert state.counted_bytes <= state.total_input_bytes


def test_empty_file(tmp_path):
    state = process_file(_write(tmp_path / "empty.log", []))
    assert state.categories == {}
    assert state.lines_processed == 0
    assert state.total_input_bytes == 0


def test_two_runs_agree(tmp_path):
    path = tmp_path / "sample.log"
    generate_sample_log(path, lines=300, seed=7)
    assert process_file(path).categories == process_file(path).categories


def test_counts_match_generated_records(tmp_path):
    path = tmp_path / "sample.log"
    expected = generate_sample_log(path, lines=500, invalid_ratio=0.2, seed=3)
    state = process_file(path)
    assert {name: stats.count for name, stats in state.categories.items()} == expected
    assert state.lines_processed <= 500


def test_missing_file_raises(tmp_path):
    with pytest.raises(InputFileError):
        process_file(tmp_path / "absent.log")


def test_directory_raises(tmp_path):
    with pytest.raises(InputFileError):
        process_file(tmp_path)


def test_read_failure_aborts():
    class Flaky(io.BytesIO):
        calls = 0

        def readline(self, *args):
            self.calls += 1
            if self.calls > 1:
                raise OSError("I/O error")
            return super().readline(*args)

    with pytest.raises(ReadError):
        aggregate_stream(Flaky(b'{"type":"A"}\n{"type":"A"}\n'), AggregateState())
