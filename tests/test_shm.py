import pytest

from procwatch.shm import SEGMENT_SIZE, main, read_value, shared_counter, write_value


def test_default_counter():
    assert shared_counter() == (100, 210)


@pytest.mark.parametrize("initial,child_add,parent_add", [(0, 1, 2), (-5, 5, 7), (3, 0, 0)])
def test_child_updates_before_parent(initial, child_add, parent_add):
    child_value, parent_value = shared_counter(initial, child_add, parent_add)
    assert child_value == initial + child_add
    assert parent_value == child_value + parent_add


def test_write_then_read_keeps_segment(tmp_path):
    path = tmp_path / "segment"
    write_value(str(path), 50)
    assert read_value(str(path), remove=False) == 50
    assert path.stat().st_size == SEGMENT_SIZE


def test_read_removes_segment_by_default(tmp_path):
    path = tmp_path / "segment"
    write_value(str(path), -42)
    assert read_value(str(path)) == -42
    assert not path.exists()


def test_read_of_new_segment_is_zero(tmp_path):
    assert read_value(str(tmp_path / "fresh")) == 0


def test_overwrite_replaces_value(tmp_path):
    path = str(tmp_path / "segment")
    write_value(path, 1)
    write_value(path, 2)
    assert read_value(path) == 2


def test_value_too_large(tmp_path):
    with pytest.raises(OverflowError):
        write_value(str(tmp_path / "segment"), 2**40)


def test_main_counter_output(capsys):
    assert main(["counter"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("parent update=210\n")


def test_main_write_and_read(tmp_path, capsys):
    path = str(tmp_path / "segment")
    assert main(["write", "--name", path]) == 0
    assert main(["read", "--name", path]) == 0
    assert "Value in Shared memory =50" in capsys.readouterr().out