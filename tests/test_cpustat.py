import pytest

from procwatch.cpustat import (
    CPUTimes,
    cpu_usage,
    format_cpu_times,
    main,
    parse_cpu_line,
    read_cpu_times,
)


def test_parse_full_line():
    times = parse_cpu_line("cpu  1 2 3 4 5 6 7 8 9 10")
    assert times == CPUTimes(1, 2, 3, 4, 5, 6, 7, 8, 9, 10)


def test_parse_short_line_leaves_zeros():
    times = parse_cpu_line("cpu 4 5 6")
    assert times == CPUTimes(user=4, nice=5, system=6)


def test_parse_stops_at_bad_token():
    times = parse_cpu_line("cpu 7 x 9")
    assert times == CPUTimes(user=7)


def test_parse_empty_line():
    assert parse_cpu_line("") == CPUTimes()


def test_total_and_idle_total():
    times = CPUTimes(user=1, idle=4, iowait=5, guest_nice=10)
    assert times.total() == 1 + 4 + 5 + 10
    assert times.idle_total() == 4 + 5


def test_read_cpu_times_from_file(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu  11 0 22 33 0 0 0 0 0 0\ncpu0 1 1 1 1\n")
    assert read_cpu_times(str(stat)) == CPUTimes(user=11, system=22, idle=33)


def test_read_cpu_times_missing_file(tmp_path):
    assert read_cpu_times(str(tmp_path / "absent")) == CPUTimes()


def test_cpu_usage_all_busy():
    assert cpu_usage(CPUTimes(), CPUTimes(user=50)) == pytest.approx(100.0)


def test_cpu_usage_all_idle():
    assert cpu_usage(CPUTimes(idle=10), CPUTimes(idle=40, iowait=20)) == pytest.approx(0.0)


def test_cpu_usage_mixed():
    usage = cpu_usage(CPUTimes(), CPUTimes(user=30, idle=70))
    assert usage == pytest.approx(30.0)


def test_cpu_usage_no_elapsed_time():
    sample = CPUTimes(user=5, idle=5)
    with pytest.raises(ValueError):
        cpu_usage(sample, sample)


def test_format_cpu_times():
    text = format_cpu_times(CPUTimes(user=3, guest_nice=4))
    lines = text.splitlines()
    assert lines[0] == "User Time: 3"
    assert lines[9] == "Guest_nice Time: 4"
    assert lines[10] == "Total CPU Time : 7"


def test_main_with_static_file(tmp_path, capsys):
    stat = tmp_path / "stat"
    stat.write_text("cpu  1 2 3 4 5 6 7 8 9 10\n")
    assert main(["--stat", str(stat), "--interval", "0"]) == 1
    captured = capsys.readouterr()
    assert "User Time: 1" in captured.out
    assert "cpustat:" in captured.err


def test_main_on_live_system(capsys):
    assert main(["--interval", "0.2"]) in (0, 1)
    out = capsys.readouterr().out
    assert "Total CPU Time : " in out