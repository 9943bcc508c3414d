from __future__ import annotations

import io
import socket
from pathlib import Path

from codefuse.cli import EXIT_OK, main


def test_no_network_calls_during_bundle_and_create_rsp(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "x.py").write_text(
        "def parse(x: str) -> str:\n    return x\n",
        encoding="utf-8",
    )

    def _blocked_create_connection(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise AssertionError(
            f"Network call attempted: create_connection args={args} kwargs={kwargs}"
        )

    base_socket = socket.socket

    class _BlockedSocket(base_socket):
        def connect(self, address):  # type: ignore[no-untyped-def]
            raise AssertionError(f"Network call attempted: connect address={address}")

    monkeypatch.setattr(socket, "create_connection", _blocked_create_connection)
    monkeypatch.setattr(socket, "socket", _BlockedSocket)

    root = ["--root", str(tmp_path), "--audit-log", str(tmp_path / "audit.jsonl")]
    bundle_args = [*root, "bundle", "-o", "out.txt", "-l", "all", "-n"]
    assert main(bundle_args, stdout=io.StringIO()) == EXIT_OK
    assert (
        main(
            [*root, "create-rsp", "-l", "all"],
            stdin=io.StringIO("\n" * 6),
            stdout=io.StringIO(),
        )
        == EXIT_OK
    )
