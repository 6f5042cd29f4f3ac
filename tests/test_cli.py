import pytest

from linkqueue.cli import main


def test_drain_matches_worked_example(capsys):
    assert main(["drain", "1", "2", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Popped element: 1",
        "Current size of queue: 2",
        "Front element: 2",
        "Elements in the queue:",
        "2",
        "3",
    ]


def test_drain_empty_queue_fails(capsys):
    assert main(["drain"]) == 1
    assert "Queue is empty" in capsys.readouterr().err


def test_show_reports_top_and_bottom(capsys):
    assert main(["show", "1", "2", "3", "4", "5", "6"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "top element: 1"
    assert out[1] == "Bottom element of the queue: 6"
    assert out[2] == "Elements in the queue:"
    assert out[3:] == ["1", "2", "3", "4", "5", "6"]


def test_show_empty_queue(capsys):
    assert main(["show"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Queue is empty: ", "Elements in the queue:"]


def test_window_worked_example(capsys):
    assert main(["window", "3", "1", "3", "-1", "-3", "5", "3", "6", "7"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.rsplit(": ", 1)[1] for line in out] == ["3", "3", "5", "5", "6", "7"]
    assert all(line.startswith("Max in window of size 3: ") for line in out)


@pytest.mark.parametrize("k", ["0", "4", "-1"])
def test_window_invalid_size(capsys, k):
    assert main(["window", k, "1", "2", "3"]) == 1
    assert "invalid size" in capsys.readouterr().err


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_non_integer_value_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["show", "abc"])
    assert excinfo.value.code == 2