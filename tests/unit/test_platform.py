"""Unit tests for host capability backends and timers."""

from __future__ import annotations

import asyncio
import shutil
import subprocess
from unittest.mock import patch

import pytest

from smsbridge.core.errors import TransportSendError
from smsbridge.core.timer import AsyncioTimer, RecordingTimer, Timer
from smsbridge.platform import (
    PermissionProbe,
    SmsTransport,
    build_permission_probe,
    build_transport,
)
from smsbridge.platform.console import ConsoleTransport
from smsbridge.platform.memory import InMemoryTransport, StaticPermissionProbe
from smsbridge.platform.termux import TermuxPermissionProbe, TermuxTransport


class TestProtocols:
    def test_backends_satisfy_transport_protocol(self):
        assert isinstance(InMemoryTransport(), SmsTransport)
        assert isinstance(ConsoleTransport(), SmsTransport)
        assert isinstance(TermuxTransport(), SmsTransport)

    def test_probes_satisfy_permission_protocol(self):
        assert isinstance(StaticPermissionProbe(), PermissionProbe)
        assert isinstance(TermuxPermissionProbe(), PermissionProbe)

    def test_timers_satisfy_timer_protocol(self):
        assert isinstance(AsyncioTimer(), Timer)
        assert isinstance(RecordingTimer(), Timer)


class TestFactories:
    @pytest.mark.parametrize(
        "name, cls",
        [("memory", InMemoryTransport), ("console", ConsoleTransport), ("termux", TermuxTransport)],
    )
    def test_build_transport(self, name: str, cls: type):
        assert isinstance(build_transport(name), cls)

    def test_build_transport_unknown(self):
        with pytest.raises(ValueError, match="Unknown transport"):
            build_transport("carrier-pigeon")

    def test_build_probe_static(self):
        probe = build_permission_probe("console", granted=False)
        assert probe.has_send_permission() is False

    def test_build_probe_termux(self):
        assert isinstance(build_permission_probe("termux"), TermuxPermissionProbe)

    def test_build_probe_unknown(self):
        with pytest.raises(ValueError):
            build_permission_probe("nope")


class TestInMemoryTransport:
    def test_records_sent(self):
        transport = InMemoryTransport()
        transport.send_text("+1", "a")
        assert transport.call_count == 1
        assert transport.sent[0].address == "+1"

    def test_fail_first(self):
        transport = InMemoryTransport(fail_first=1)
        with pytest.raises(TransportSendError):
            transport.send_text("+1", "a")
        transport.send_text("+1", "a")
        assert transport.call_count == 2
        assert len(transport.sent) == 1

    def test_flush_clears(self):
        transport = InMemoryTransport()
        transport.send_text("+1", "a")
        assert len(transport.flush()) == 1
        assert transport.sent == []


class TestConsoleTransport:
    def test_counts_and_logs(self, caplog: pytest.LogCaptureFixture):
        transport = ConsoleTransport()
        with caplog.at_level("INFO", logger="smsbridge.platform.console"):
            transport.send_text("+919876543210", "hello")
        assert transport.sent_count == 1
        assert "+919876543210" in caplog.text


class TestTermuxTransport:
    def test_success(self):
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
        with patch("smsbridge.platform.termux.subprocess.run", return_value=completed) as run:
            TermuxTransport().send_text("+919876543210", "hello")
        run.assert_called_once()
        assert run.call_args.args[0] == [
            "termux-sms-send",
            "-n",
            "+919876543210",
            "--",
            "hello",
        ]
        assert run.call_args.kwargs["timeout"] is None

    def test_dash_body_passed_after_separator(self):
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
        with patch("smsbridge.platform.termux.subprocess.run", return_value=completed) as run:
            TermuxTransport().send_text("+919876543210", "-hello there")
        argv = run.call_args.args[0]
        assert argv[-2:] == ["--", "-hello there"]

    @pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
    def test_dash_body_reaches_getopts_command(self, tmp_path):
        log = tmp_path / "sent.log"
        script = tmp_path / "termux-sms-send"
        script.write_text(
            "#!/bin/sh\n"
            "while getopts :hs:n: option; do\n"
            "  case \"$option\" in\n"
            "    h) echo usage; exit 0;;\n"
            "    s) ;;\n"
            "    n) number=\"$OPTARG\";;\n"
            "    *) echo bad option >&2; exit 1;;\n"
            "  esac\n"
            "done\n"
            "shift $((OPTIND-1))\n"
            f"printf '%s|%s\\n' \"$number\" \"$*\" >> '{log}'\n"
        )
        script.chmod(0o755)

        TermuxTransport(command=str(script)).send_text("+919876543210", "-hello there")

        assert log.read_text() == "+919876543210|-hello there\n"

    def test_nonzero_exit_raises(self):
        completed = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="no sim"
        )
        with patch("smsbridge.platform.termux.subprocess.run", return_value=completed):
            with pytest.raises(TransportSendError, match="no sim"):
                TermuxTransport().send_text("+1", "x")

    def test_missing_binary_raises(self):
        with patch(
            "smsbridge.platform.termux.subprocess.run",
            side_effect=FileNotFoundError("termux-sms-send"),
        ):
            with pytest.raises(TransportSendError, match="could not run"):
                TermuxTransport().send_text("+1", "x")

    def test_permission_probe_uses_path(self):
        with patch("smsbridge.platform.termux.shutil.which", return_value=None):
            assert TermuxPermissionProbe().has_send_permission() is False
        with patch(
            "smsbridge.platform.termux.shutil.which",
            return_value="/data/data/com.termux/files/usr/bin/termux-sms-send",
        ):
            assert TermuxPermissionProbe().has_send_permission() is True


class TestTimers:
    def test_recording_timer(self):
        timer = RecordingTimer()
        asyncio.run(timer.sleep(2.0))
        asyncio.run(timer.sleep(3.0))
        assert timer.delays == [2.0, 3.0]
        assert timer.total_seconds == 5.0

    def test_asyncio_timer_zero_returns(self):
        asyncio.run(AsyncioTimer().sleep(0))

    def test_asyncio_timer_short_sleep(self):
        asyncio.run(AsyncioTimer().sleep(0.01))
