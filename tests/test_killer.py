import io
import signal
import subprocess
import sys

import pytest

from procwatch.killer import kill_process, monitor_loop, prompt_and_kill


@pytest.fixture
def sleeper():
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    yield proc
    if proc.poll() is None:
        proc.kill()
    proc.wait()


@pytest.fixture
def dead_pid():
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    proc.wait()
    return proc.pid


@pytest.fixture
def proc_root(tmp_path):
    (tmp_path / "uptime").write_text("100.0 50.0\n")
    entry = tmp_path / "42"
    entry.mkdir()
    fields = " ".join(["0"] * 19)
    (entry / "stat").write_text(f"42 (demo) S {fields}\n")
    (entry / "status").write_text("Name:\tdemo\nVmRSS:\t 1234 kB\n")
    return tmp_path


def test_kill_process_terminates_target(sleeper):
    kill_process(sleeper.pid)
    assert sleeper.wait(timeout=10) == -signal.SIGKILL


def test_kill_process_with_other_signal(sleeper):
    kill_process(sleeper.pid, signal.SIGTERM)
    assert sleeper.wait(timeout=10) == -signal.SIGTERM


def test_kill_process_missing_pid_raises(dead_pid):
    with pytest.raises(ProcessLookupError):
        kill_process(dead_pid)


def test_prompt_zero_kills_nothing(proc_root):
    out = io.StringIO()
    assert prompt_and_kill(io.StringIO("0\n"), out, proc_root) is None
    text = out.getvalue()
    assert text.startswith("PID\tCPU%\tMemory (kB)\tName\n")
    assert "Enter PID to Kill : \n" in text
    assert "42\t0\t1234\t(demo)\n" in text


def test_prompt_non_number_kills_nothing(proc_root):
    out = io.StringIO()
    assert prompt_and_kill(io.StringIO("abc\n"), out, proc_root) is None
    assert "terminated" not in out.getvalue()


def test_prompt_empty_input_kills_nothing(proc_root):
    out = io.StringIO()
    assert prompt_and_kill(io.StringIO(""), out, proc_root) is None
    assert "terminated" not in out.getvalue()


def test_prompt_kills_given_pid(proc_root, sleeper):
    out = io.StringIO()
    result = prompt_and_kill(io.StringIO(f"{sleeper.pid}\n"), out, proc_root)
    assert result == sleeper.pid
    assert f"Process {sleeper.pid} terminated successfully\n" in out.getvalue()
    assert sleeper.wait(timeout=10) == -signal.SIGKILL


def test_prompt_reports_failure(proc_root, dead_pid, capsys):
    out = io.StringIO()
    assert prompt_and_kill(io.StringIO(f"{dead_pid}\n"), out, proc_root) is None
    assert "Failed to kill Process" in capsys.readouterr().err
    assert "terminated" not in out.getvalue()


def test_monitor_quits_on_q(proc_root):
    out = io.StringIO()
    monitor_loop(io.StringIO("0\nq\n0\n\n"), out, proc_root)
    text = out.getvalue()
    assert text.count("Enter PID to Kill") == 1
    assert text.count("Press 'q' to quit or Enter to refresh : ") == 1


def test_monitor_refreshes_until_upper_q(proc_root):
    out = io.StringIO()
    monitor_loop(io.StringIO("0\n\n0\n\n0\nQ\n"), out, proc_root)
    assert out.getvalue().count("Enter PID to Kill") == 3


def test_monitor_stops_at_end_of_input(proc_root):
    out = io.StringIO()
    monitor_loop(io.StringIO("0\n\n0\n"), out, proc_root)
    assert out.getvalue().count("Enter PID to Kill") == 2