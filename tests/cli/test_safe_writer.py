"""Unit tests for the SafeWriter class in treescan CLI."""

import errno
import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from treescan.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Create a mock for signal handler checks."""
    with patch("treescan.cli.safe_writer.signal_handler") as mock:
        mock.interrupted.return_value = False
        yield mock


def written_bytes(mock_write):
    return b"".join(bytes(call.args[1]) for call in mock_write.call_args_list)


def test_safe_writer_init_with_fd():
    writer = SafeWriter(3)

    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_safe_writer_init_with_path_does_not_open(tmp_path):
    target = tmp_path / "out.json"
    writer = SafeWriter(target)

    assert writer.file == target
    assert writer.fd is None
    assert not target.exists()


def test_safe_writer_init_with_invalid_type():
    with pytest.raises(TypeError) as excinfo:
        SafeWriter(42.0)

    assert "Expected int, str, or PathLike" in str(excinfo.value)


def test_safe_writer_write(mock_signals):
    with patch("os.write") as mock_write:
        mock_write.side_effect = lambda fd, data: len(data)
        writer = SafeWriter(3)
        writer.write("test data")

    assert mock_write.call_args.args[0] == 3
    assert written_bytes(mock_write) == b"test data"


def test_safe_writer_handles_partial_writes(mock_signals):
    with patch("os.write") as mock_write:
        # Accept at most four bytes per call
        mock_write.side_effect = lambda fd, data: min(4, len(data))
        writer = SafeWriter(3)
        writer.write("0123456789")

    assert [bytes(call.args[1]) for call in mock_write.call_args_list] == [b"0123456789", b"456789", b"89"]


def test_safe_writer_encodes_utf8(mock_signals):
    with patch("os.write") as mock_write:
        mock_write.side_effect = lambda fd, data: len(data)
        SafeWriter(3).write("résumé")

    assert written_bytes(mock_write) == "résumé".encode("utf-8")


def test_safe_writer_write_after_close():
    writer = SafeWriter(3)
    writer._closed = True

    with pytest.raises(ValueError) as excinfo:
        writer.write("test data")

    assert "Cannot write to closed SafeWriter" in str(excinfo.value)


def test_safe_writer_write_when_interrupted(mock_signals):
    mock_signals.interrupted.return_value = True

    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("test data")

    mock_write.assert_not_called()


def test_safe_writer_write_with_os_error(mock_signals):
    with patch("os.write") as mock_write:
        mock_write.side_effect = OSError(errno.EIO, "Input/output error")

        with pytest.raises(OSError) as excinfo:
            SafeWriter(3).write("test data")

    assert excinfo.value.errno == errno.EIO


def test_safe_writer_write_with_epipe(mock_signals):
    with patch("os.write") as mock_write:
        mock_write.side_effect = OSError(errno.EPIPE, "Broken pipe")

        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("test data")


def test_safe_writer_close_fd_only():
    writer = SafeWriter(3)
    writer.close()

    assert writer._closed


def test_safe_writer_close_with_file():
    mock_file = MagicMock()
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    writer.close()
    writer.close()

    mock_file.close.assert_called_once()
    assert writer._closed


def test_safe_writer_close_ignores_epipe():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    writer.close()

    assert writer._closed


def test_safe_writer_actual_file_write(tmp_path, mock_signals):
    target = tmp_path / "out.json"

    with SafeWriter(str(target)) as writer:
        writer.write('{"root":"/x",')
        writer.write('"files":[]}\n')

    assert Path(target).read_bytes() == b'{"root":"/x","files":[]}\n'
    assert writer._closed


def test_safe_writer_context_manager_prefers_original_exception():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "close failed")

    with pytest.raises(RuntimeError):
        with SafeWriter(3) as writer:
            writer._file_obj = mock_file
            raise RuntimeError("original")


def test_safe_writer_pipe(mock_signals):
    read_fd, write_fd = os.pipe()
    try:
        with SafeWriter(write_fd) as writer:
            writer.write("through a pipe\n")
        os.close(write_fd)
        write_fd = -1
        assert os.read(read_fd, 100) == b"through a pipe\n"
    finally:
        os.close(read_fd)
        if write_fd != -1:
            os.close(write_fd)
