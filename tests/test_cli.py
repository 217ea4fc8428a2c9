from pushswap.cli import main


def test_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_invalid_argument_reports_error(capsys):
    assert main(["1", "a"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_duplicate_reports_error(capsys):
    assert main(["3", "3"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_overflow_reports_error(capsys):
    assert main(["2147483648"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_numbers_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_three_numbers(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


def test_five_numbers_balanced_pushes(capsys):
    assert main(["5", "4", "3", "2", "1"]) == 0
    ops = capsys.readouterr().out.split()
    assert ops.count("pb") == 2
    assert ops[-2:] == ["pa", "pa"]


def test_reads_sys_argv_when_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["push_swap", "2", "1"])
    assert main() == 0
    assert capsys.readouterr().out == "sa\n"