import pytest

from argsmith.mode import ParseMode
from argsmith.parser.compiled_config import compile_config
from argsmith.parser.errors import InvalidOptionValue, MissingOptionValue, UnknownOption
from argsmith.parser.scanner import scan_options
from argsmith.parser.spec import CommandSpec


def build_config():
    spec = CommandSpec("example")
    spec.add_option("all", short="a", long="all", type="bool", help="Alpha option")
    spec.add_option("brief", short="b", type="bool", help="Beta option")
    spec.add_option("output", short="o", long="output", help="Output file")
    spec.add_option("verbose", short="v", long="verbose", type="bool", action="count")
    spec.add_option("include", short="I", long="include", action="append")
    spec.add_option("number", short="n", long="number", type="int")
    return compile_config(spec)


def scan(argv, mode=ParseMode.INTERMIXED):
    return scan_options(build_config(), argv, mode)


def test_scan_defaults():
    result = scan([])
    assert result.values == {
        "all": False,
        "brief": False,
        "output": None,
        "verbose": 0,
        "include": [],
        "number": None,
    }
    assert result.positionals == []
    assert result.errors == []


def test_scan_values_keep_declaration_order():
    result = scan(["-n", "3", "-o", "out", "-a"])
    assert list(result.values) == [
        "all",
        "brief",
        "output",
        "verbose",
        "include",
        "number",
    ]


def test_posix_bundling():
    """Test the bundling of short options in the POSIX style."""
    bundled = scan(["-ab"])
    separate = scan(["-a", "-b"])
    assert bundled.values == separate.values
    assert bundled.values["all"] is True
    assert bundled.values["brief"] is True


def test_posix_bundling_last_has_value():
    result = scan(["-abo", "file.txt"])
    assert result.values["all"] is True
    assert result.values["brief"] is True
    assert result.values["output"] == "file.txt"
    assert result.positionals == []


def test_posix_bundling_inline_value():
    result = scan(["-abofile.txt"])
    assert result.values["output"] == "file.txt"
    assert result.positionals == []


def test_posix_bundling_value_swallows_rest_of_cluster():
    result = scan(["-oab"])
    assert result.values["output"] == "ab"
    assert result.values["all"] is False


def test_posix_bundling_unknown_char_ends_cluster():
    result = scan(["-axb"])
    assert result.errors == [UnknownOption("-x")]
    assert result.values["all"] is True
    assert result.values["brief"] is False


@pytest.mark.parametrize(
    "argv",
    [
        ["-ofile.txt"],
        ["-o", "file.txt"],
        ["--output=file.txt"],
        ["--output", "file.txt"],
    ],
)
def test_option_value_forms_are_equivalent(argv):
    result = scan(argv)
    assert result.values["output"] == "file.txt"
    assert result.errors == []


def test_long_option_splits_on_first_equals():
    assert scan(["--output=a=b"]).values["output"] == "a=b"


def test_empty_inline_value_takes_next_token():
    result = scan(["--output=", "file.txt"])
    assert result.values["output"] == "file.txt"
    assert result.positionals == []


def test_missing_option_value():
    assert scan(["--output"]).errors == [MissingOptionValue("--output")]
    assert scan(["--output="]).errors == [MissingOptionValue("--output")]
    assert scan(["-ao"]).errors == [MissingOptionValue("-o")]


def test_missing_option_value_details():
    (error,) = scan(["-n"]).errors
    assert error.key == "number"
    assert error.value_name == "NUMBER"


def test_value_lookahead_is_greedy():
    """A value-taking option consumes the next token even if it looks like a flag."""
    result = scan(["--output", "--verbose"])
    assert result.values["output"] == "--verbose"
    assert result.values["verbose"] == 0
    assert result.errors == []


def test_store_overwrites():
    assert scan(["-o", "x", "--output", "y"]).values["output"] == "y"


def test_count_action():
    assert scan(["-vvv"]).values["verbose"] == 3
    assert scan(["-v", "--verbose", "-av"]).values["verbose"] == 3


def test_append_action():
    result = scan(["-I", "a", "--include=b", "-Ic", "--include", "d"])
    assert result.values["include"] == ["a", "b", "c", "d"]


def test_invalid_option_value():
    result = scan(["--number", "abc", "-nxyz", "--number=7"])
    assert result.errors == [
        InvalidOptionValue("--number", "abc"),
        InvalidOptionValue("-n", "xyz"),
    ]
    assert result.values["number"] == 7


def test_invalid_option_value_keeps_default():
    result = scan(["-n", "3.5"])
    assert result.values["number"] is None
    assert result.errors == [InvalidOptionValue("-n", "3.5")]


def test_boolean_never_takes_next_token():
    result = scan(["--all", "no"])
    assert result.values["all"] is True
    assert result.positionals == ["no"]


def test_boolean_inline_value():
    assert scan(["--all=no"]).values["all"] is False
    assert scan(["--all=YES"]).values["all"] is True
    assert scan(["--all=maybe"]).errors == [InvalidOptionValue("--all", "maybe")]


def test_unknown_options():
    result = scan(["--nope", "x", "--nope=1", "-z"])
    assert result.errors == [
        UnknownOption("--nope"),
        UnknownOption("--nope"),
        UnknownOption("-z"),
    ]
    assert result.positionals == ["x"]


def test_option_terminator():
    result = scan(["-a", "--", "-b", "--output", "x", "--"])
    assert result.values["all"] is True
    assert result.values["brief"] is False
    assert result.positionals == ["-b", "--output", "x", "--"]


def test_lone_dash_is_positional():
    result = scan(["-", "-a"])
    assert result.positionals == ["-"]
    assert result.values["all"] is True


def test_intermixed_mode():
    result = scan(["-a", "arg1", "-o", "v", "arg2"])
    assert result.values["output"] == "v"
    assert result.positionals == ["arg1", "arg2"]


def test_strict_mode():
    result = scan(["-a", "arg1", "-o", "v", "arg2"], mode=ParseMode.STRICT)
    assert result.values["all"] is True
    assert result.values["output"] is None
    assert result.positionals == ["arg1", "-o", "v", "arg2"]


def test_strict_mode_keeps_terminator_after_positional():
    result = scan(["x", "--", "y"], mode=ParseMode.STRICT)
    assert result.positionals == ["x", "--", "y"]


def test_defaults_are_not_shared():
    config = build_config()
    first = scan_options(config, [])
    first.values["include"].append("mutated")
    assert scan_options(config, []).values["include"] == []
