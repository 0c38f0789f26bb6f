"""
Tests for the built-in scenarios and the command-line entry point.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from sequencer.types import Job
from sequencer.selftest import SCENARIOS, SUCCESS_MESSAGE, run_self_tests
from sequencer.__main__ import main


class TestSelfTest:
    """Test the built-in scenario runner."""

    def test_prints_confirmation(self, capsys):
        """All scenarios pass and a confirmation line is printed."""
        run_self_tests()

        assert capsys.readouterr().out == SUCCESS_MESSAGE + "\n"

    def test_mismatch_names_scenario(self, monkeypatch):
        """A wrong expectation aborts with the scenario name."""
        monkeypatch.setitem(SCENARIOS, "broken", ([Job("a", deadline=1, profit=1)], ["b"]))

        with pytest.raises(AssertionError, match="broken"):
            run_self_tests()

    def test_mismatch_fails_with_optimizations(self):
        """A wrong expectation still fails the process under python -O."""
        root = Path(__file__).resolve().parents[1]
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(root), env.get("PYTHONPATH")) if p
        )
        code = (
            "from sequencer.types import Job\n"
            "from sequencer.selftest import SCENARIOS, run_self_tests\n"
            "SCENARIOS['broken'] = ([Job('a', deadline=1, profit=1)], ['b'])\n"
            "run_self_tests()\n"
        )

        proc = subprocess.run(
            [sys.executable, "-O", "-c", code],
            capture_output=True, text=True, env=env
        )

        assert proc.returncode != 0
        assert SUCCESS_MESSAGE not in proc.stdout
        assert "broken" in proc.stderr


class TestMain:
    """Test the command-line entry point."""

    def test_no_arguments_runs_self_tests(self, capsys):
        """No arguments runs the scenarios and exits cleanly."""
        assert main([]) == 0
        assert SUCCESS_MESSAGE in capsys.readouterr().out

    def test_serve_flag(self, monkeypatch):
        """--serve hands the host and port to the server."""
        calls = []
        monkeypatch.setattr(
            "sequencer.__main__.run_server",
            lambda **kwargs: calls.append(kwargs)
        )

        assert main(["--serve", "--host", "127.0.0.1", "--port", "9000"]) == 0
        assert calls == [{'host': '127.0.0.1', 'port': 9000, 'debug': False}]
