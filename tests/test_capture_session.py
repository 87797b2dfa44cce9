from __future__ import annotations

import pytest

from tellme.capture import CaptureRecord, CaptureSession
from tellme.errors import NoPreviousCaptureError, StorageError
from tellme.storage import SessionStore


def test_prepare_writes_command_and_empty_output(store: SessionStore) -> None:
    session = CaptureSession(store)

    output_path = session.prepare_new_command("cargo test")

    assert output_path == store.output_file()
    assert output_path.exists()
    assert output_path.read_bytes() == b""
    assert session.read_cmd_file() == "cargo test"


def test_prepare_preserves_command_exactly(store: SessionStore) -> None:
    session = CaptureSession(store)
    command = "printf 'a\\tb' | grep -E \"x|y\"  # ünïcode\r\n"

    session.prepare_new_command(command)

    assert session.read_cmd_file() == command


def test_prepare_twice_discards_previous_capture(store: SessionStore) -> None:
    session = CaptureSession(store)
    first = session.prepare_new_command("make build")
    first.write_bytes(b"lots of build output")

    second = session.prepare_new_command("ls")

    assert second == first
    assert session.read_cmd_file() == "ls"
    assert session.read_output() == b""


def test_prepare_recreates_missing_temp_dir(store: SessionStore) -> None:
    session = CaptureSession(store)
    store.temp_dir.rmdir()

    session.prepare_new_command("echo hi")

    assert session.has_previous()


def test_has_previous(store: SessionStore) -> None:
    session = CaptureSession(store)

    assert not session.has_previous()

    session.prepare_new_command("test")

    assert session.has_previous()


def test_has_previous_requires_both_files(store: SessionStore) -> None:
    session = CaptureSession(store)
    session.prepare_new_command("test")
    store.output_file().unlink()

    assert not session.has_previous()


def test_read_output_returns_raw_bytes(store: SessionStore) -> None:
    session = CaptureSession(store)
    path = session.prepare_new_command("last cmd")
    path.write_bytes(b"last output\x1b[0m\xff")

    assert session.read_output() == b"last output\x1b[0m\xff"


def test_reads_fail_without_capture(store: SessionStore) -> None:
    session = CaptureSession(store)

    with pytest.raises(StorageError):
        session.read_cmd_file()
    with pytest.raises(StorageError):
        session.read_output()


def test_last_capture(store: SessionStore) -> None:
    session = CaptureSession(store)
    session.prepare_new_command("echo hi").write_bytes(b"hi\n")

    assert session.last_capture() == CaptureRecord(command="echo hi", output=b"hi\n")


def test_last_capture_without_previous(store: SessionStore) -> None:
    with pytest.raises(NoPreviousCaptureError):
        CaptureSession(store).last_capture()


def test_cleanup(store: SessionStore) -> None:
    session = CaptureSession(store)
    session.prepare_new_command("test")

    session.cleanup()

    assert not store.cmd_file().exists()
    assert not store.output_file().exists()
    assert not session.has_previous()


def test_cleanup_is_repeatable(store: SessionStore) -> None:
    session = CaptureSession(store)

    session.cleanup()
    session.cleanup()

    assert not session.has_previous()


def test_cleanup_leaves_other_shells_alone(store: SessionStore) -> None:
    other = SessionStore(12345, config_dir=store.config_dir, temp_dir=store.temp_dir)
    CaptureSession(other).prepare_new_command("make")
    session = CaptureSession(store)
    session.prepare_new_command("ls")

    session.cleanup()

    assert CaptureSession(other).has_previous()


def test_should_prepare(store: SessionStore) -> None:
    session = CaptureSession(store)
    assert not session.should_prepare("ls")

    store.set_recording_enabled(True)

    assert session.should_prepare("ls")
    assert not session.should_prepare("vim file.txt")

    store.save_skip_commands(store.skip_commands() + ["secret*"])

    assert not session.should_prepare("secret_cmd")
    assert session.should_prepare("ls")


def test_should_prepare_has_no_side_effects(store: SessionStore) -> None:
    store.set_recording_enabled(True)
    session = CaptureSession(store)

    session.should_prepare("make build")

    assert not store.cmd_file().exists()
    assert not store.output_file().exists()


def test_prepare_round_trips_undecodable_command(store: SessionStore) -> None:
    session = CaptureSession(store)
    # Non-UTF-8 argv bytes reach Python as lone surrogates.
    command = b"cat caf\xe9.txt".decode("utf-8", errors="surrogateescape")

    session.prepare_new_command(command)

    assert store.cmd_file().read_bytes() == b"cat caf\xe9.txt"
    assert session.read_cmd_file() == command
    assert session.last_capture().command == command
