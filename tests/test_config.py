import pytest

from philosophers.config import (
    ArgumentError,
    Settings,
    check_digit_args,
    parse_args,
    parse_number,
)


def test_parse_args_four_arguments():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, -1)


def test_parse_args_with_meal_count():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.n_philo == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 100
    assert settings.must_eat == 7


def test_default_must_eat_is_minus_one():
    assert parse_args(["1", "800", "200", "200"]).must_eat == -1


def test_int_max_accepted():
    settings = parse_args(["2", "2147483647", "1", "1"])
    assert settings.time_to_die == 2147483647


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        ["2147483648", "800", "200", "200"],
        ["5", "", "200", "200"],
    ],
)
def test_out_of_range_rejected(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["-5", "800", "200", "200"],
        ["+5", "800", "200", "200"],
        ["5", "8a0", "200", "200"],
        ["5", "800", "200", "20 0"],
    ],
)
def test_non_digit_rejected(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


@pytest.mark.parametrize(
    "args", [[], ["5", "800", "200"], ["5", "800", "200", "200", "3", "1"]]
)
def test_wrong_count_rejected(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["x", "1", "1", "1"])


def test_check_digit_args_rejects_letters():
    with pytest.raises(ArgumentError):
        check_digit_args(["12", "3x"])


def test_parse_number_leading_digits():
    assert parse_number("42abc") == 42
    assert parse_number("") == 0
    assert parse_number("abc") == 0
    assert parse_number("007") == 7


def test_settings_is_frozen():
    settings = parse_args(["1", "2", "3", "4"])
    with pytest.raises(AttributeError):
        settings.n_philo = 9  # type: ignore[misc]
    assert settings.n_philo == 1
    assert settings == Settings(1, 2, 3, 4, -1)