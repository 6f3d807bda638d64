import io
import signal
from unittest import mock

import pytest

from sigtalk.client import ClientError, main, send_bit, send_message
from sigtalk.server import Server


def _loopback(server):
    return lambda pid, sig: server.handle_signal(sig, None)


def _recording_loopback(server, seen):
    def deliver(pid, sig):
        seen.append((pid, sig))
        server.handle_signal(sig, None)

    return deliver


def test_send_bit_uses_matching_signal():
    out = io.StringIO()
    server = Server(output=out)
    seen = []
    # 'A' is 0x41, sent least significant bit first, then a NUL terminator.
    bits = [1, 0, 0, 0, 0, 0, 1, 0] + [0] * 8
    with mock.patch("os.kill", side_effect=_recording_loopback(server, seen)):
        for bit in bits:
            send_bit(1234, bit, 0)
    assert out.getvalue() == "A\n"
    assert seen[:2] == [(1234, signal.SIGUSR2), (1234, signal.SIGUSR1)]


def test_send_bit_rejects_invalid_bit():
    with mock.patch("os.kill") as kill:
        with pytest.raises(ValueError):
            send_bit(1234, 5, 0)
    assert kill.call_count == 0


def test_send_bit_failure_raises_client_error():
    with mock.patch("os.kill", side_effect=ProcessLookupError):
        with pytest.raises(ClientError, match="could not send SIGUSR1 to PID 42"):
            send_bit(42, 0, 0)


def test_send_message_reaches_server():
    out = io.StringIO()
    server = Server(output=out)
    with mock.patch("os.kill", side_effect=_loopback(server)):
        send_message(99, "ping pong", 0)
    assert out.getvalue() == "ping pong\n"


def test_send_message_signal_count():
    out = io.StringIO()
    server = Server(output=out)
    seen = []
    with mock.patch("os.kill", side_effect=_recording_loopback(server, seen)):
        send_message(99, "abcd", 0)
    assert out.getvalue() == "abcd\n"
    assert len(seen) == 8 * 5


def test_main_usage(capsys):
    assert main([]) == 1
    assert "USAGE:" in capsys.readouterr().out


def test_main_sends_message(capsys):
    out = io.StringIO()
    server = Server(output=out)
    with mock.patch("os.kill", side_effect=_loopback(server)) as kill:
        assert main(["  321", "hello"]) == 0
    assert kill.call_args.args[0] == 321
    assert out.getvalue() == "hello\n"
    assert capsys.readouterr().out.endswith("Message sent successfuly!\n")


def test_main_reports_delivery_error(capsys):
    with mock.patch("os.kill", side_effect=PermissionError):
        assert main(["42", "hi"]) == 1
    assert "ERROR: could not send" in capsys.readouterr().out