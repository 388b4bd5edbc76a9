import pytest

from canvas_csv.config import default_output, resolve_options
from canvas_csv.errors import UsageError


def test_default_output_replaces_extension_in_working_directory():
    assert default_output("vault/maps/graph.canvas") == "graph.csv"
    assert default_output("-") == "-"


def test_positional_argument_is_used_when_in_is_missing():
    options = resolve_options(None, "a.canvas")
    assert options.in_path == "a.canvas"
    assert options.out_path == "a.csv"
    assert options.keep_path is False


def test_in_option_wins_over_positional():
    options = resolve_options("b.canvas", "a.canvas", out_path="-", keep_path=True)
    assert options.in_path == "b.canvas"
    assert options.out_path == "-"
    assert options.keep_path is True


def test_missing_input_is_a_usage_error():
    with pytest.raises(UsageError):
        resolve_options(None, None)


@pytest.mark.parametrize(
    "in_path, expected",
    [
        (".canvas", ".csv"),
        ("maps/a.b.canvas", "a.b.csv"),
        ("maps/noext", "noext.csv"),
    ],
)
def test_default_output_trims_only_the_last_extension(in_path, expected):
    assert default_output(in_path) == expected
