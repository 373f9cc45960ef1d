"""
Tests for the command line entry point
"""

import json
import logging
from unittest import mock

import pytest

from world_disassembler import OutOfBoundsError, WorldDisassembler, disassemble
from world_disassembler.main import collect_world_files, main, process_world_file


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def world_file(tmp_path, world_builder):
    path = tmp_path / "cellar1.world"
    path.write_bytes(world_builder([[3, 7, -1], [-1]], num_elements=2))
    return path


class TestCollectWorldFiles:
    """Test input path expansion"""

    def test_directory_and_file(self, tmp_path, world_file):
        other = tmp_path / "sub" / "tavern.world"
        other.parent.mkdir()
        other.write_bytes(b'')
        (tmp_path / "notes.txt").write_text("x")

        files, missing = collect_world_files([tmp_path, other])
        assert files == [world_file, other]
        assert missing == []

    def test_missing_path(self, tmp_path):
        files, missing = collect_world_files([tmp_path / "nope.world"])
        assert files == []
        assert missing == [tmp_path / "nope.world"]


class TestProcessWorldFile:
    """Test single-file processing"""

    def test_text_report_next_to_input(self, world_file):
        output = process_world_file(world_file)
        assert output == world_file.parent / "cellar1.world.txt"
        assert output.read_bytes() == disassemble(world_file.read_bytes()).encode('ascii')

    def test_json_report(self, tmp_path, world_file):
        out_dir = tmp_path / "out"
        output = process_world_file(world_file, out_dir, 'json')
        assert output == out_dir / "cellar1.world.json"
        data = json.loads(output.read_text())
        assert data['header']['num_elements'] == 2
        assert data['offsets'][0]['values'] == [3, 7]
        assert data['offsets'][1]['values'] == []

    def test_truncated_file_writes_nothing(self, tmp_path):
        path = tmp_path / "broken.world"
        path.write_bytes(bytes(0x20))
        with pytest.raises(OutOfBoundsError):
            process_world_file(path)
        assert not (tmp_path / "broken.world.txt").exists()

    @pytest.mark.parametrize('output_format', ['text', 'json'])
    def test_write_failure_removes_report(self, world_file, output_format):
        class FailingDisassembler(WorldDisassembler):
            def render(self, layout):
                raise OSError("No space left on device")

        def failing_dump(obj, fp, **kwargs):
            fp.write('{"partial": ')
            raise OSError("No space left on device")

        with mock.patch('world_disassembler.main.json.dump', failing_dump):
            with pytest.raises(OSError):
                process_world_file(world_file, output_format=output_format,
                                   disassembler=FailingDisassembler())
        assert list(world_file.parent.glob("cellar1.world.*")) == []


class TestMain:
    """Test the command line"""

    def test_success(self, tmp_path, world_file):
        out_dir = tmp_path / "reports"
        rc = main([str(world_file), '--output', str(out_dir),
                   '--log-dir', str(tmp_path / "logs")])
        assert rc == 0
        report = (out_dir / "cellar1.world.txt").read_bytes()
        assert report.endswith(b"0 : 0x48 -> 3, 7\r\n1 : 0x4E -> \r\n")
        assert list((tmp_path / "logs").glob("world_disassembler_*.log"))

    def test_failure_continues(self, tmp_path, world_file):
        (tmp_path / "broken.world").write_bytes(bytes(0x10))
        rc = main([str(tmp_path), '--log-dir', str(tmp_path / "logs")])
        assert rc == 1
        assert (tmp_path / "cellar1.world.txt").exists()
        assert not (tmp_path / "broken.world.txt").exists()

    def test_no_inputs(self, tmp_path):
        rc = main([str(tmp_path / "missing"), '--log-dir', str(tmp_path / "logs")])
        assert rc == 1
