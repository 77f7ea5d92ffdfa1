from philo.args import ARG_COUNT_ERROR, NOT_NUMBER_ERROR, NOT_POSITIVE_ERROR
from philo.cli import main


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == ARG_COUNT_ERROR


def test_non_numeric_argument(capsys):
    assert main(["a", "1", "1", "1"]) == 1
    assert capsys.readouterr().out.strip() == NOT_NUMBER_ERROR


def test_zero_argument_rejected(capsys):
    assert main(["0", "100", "100", "100"]) == 1
    assert capsys.readouterr().out.strip() == NOT_POSITIVE_ERROR


def test_zero_meal_target_rejected(capsys):
    assert main(["2", "100", "100", "100", "0"]) == 1
    assert capsys.readouterr().out.strip() == NOT_POSITIVE_ERROR


def test_single_philosopher(capsys):
    assert main(["1", "30", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[1].endswith(" 1 is dead")


def test_meal_target_run_finishes_without_death(capsys):
    assert main(["2", "800", "50", "50", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.endswith("is eating") for line in lines) >= 4
    assert not any(line.endswith("died") for line in lines)


def test_starving_run_ends_with_death(capsys):
    assert main(["4", "310", "200", "100"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith("died")
    assert sum(line.endswith("died") for line in lines) == 1