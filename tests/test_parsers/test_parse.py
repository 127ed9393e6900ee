import pytest

from argsmith.exceptions import CommandArgumentError
from argsmith.mode import ParseMode
from argsmith.parser import CommandParser, CommandSpec, ParseResult, parse
from argsmith.parser.compiled_config import compile_config
from argsmith.parser.errors import (
    InvalidArgument,
    InvalidOptionValue,
    MissingArgument,
    UnknownArgument,
    UnknownOption,
)


def build_http_spec():
    spec = CommandSpec("http", summary="A user-friendly HTTP client.")
    spec.add_option("verbose", short="v", long="verbose", type="bool", action="count")
    spec.add_option("header", short="H", long="header", action="append")
    spec.add_option("timeout", short="t", long="timeout", type="float", default=30.0)
    spec.add_option("follow", short="F", long="follow", type="bool")
    spec.add_argument("method", nargs="?", default="GET")
    spec.add_argument("url")
    spec.add_argument("items", nargs="*", value_name="REQUEST_ITEM")
    return spec


def test_parse_empty_spec():
    assert parse(CommandSpec("empty"), []) == ({}, {}, [])


def test_parse_returns_named_tuple():
    result = parse(CommandSpec("empty"), [])
    assert isinstance(result, ParseResult)
    args, opts, errors = result
    assert (args, opts, errors) == ({}, {}, [])
    assert result.ok


def test_parse_cp_scenario():
    spec = CommandSpec("cp")
    spec.add_argument("src", nargs="+")
    spec.add_argument("dst")
    result = parse(spec, ["src1", "src2", "dst"])
    assert result == ({"src": ["src1", "src2"], "dst": "dst"}, {}, [])


def test_parse_http_scenario():
    result = parse(
        build_http_spec(),
        [
            "-vv",
            "POST",
            "--timeout=2.5",
            "example.org/api",
            "-H",
            "Accept: */*",
            "name=joe",
            "--follow",
            "age:=30",
        ],
    )
    assert result.errors == []
    assert result.args == {
        "method": "POST",
        "url": "example.org/api",
        "items": ["name=joe", "age:=30"],
    }
    assert result.opts == {
        "verbose": 2,
        "header": ["Accept: */*"],
        "timeout": 2.5,
        "follow": True,
    }


def test_parse_http_defaults():
    result = parse(build_http_spec(), ["example.org"])
    assert result.errors == []
    assert result.args == {"method": "GET", "url": "example.org", "items": []}
    assert result.opts == {
        "verbose": 0,
        "header": [],
        "timeout": 30.0,
        "follow": False,
    }


def test_parse_every_option_key_present():
    spec = build_http_spec()
    result = parse(spec, ["--follow", "x"])
    assert list(result.opts) == [option.key for option in spec.options]


def test_clustered_flags_equal_separate_flags():
    spec = CommandSpec("example")
    for name in "abc":
        spec.add_option(name, short=name, type="bool")
    assert parse(spec, ["-abc"]) == parse(spec, ["-a", "-b", "-c"])


def test_strict_versus_intermixed():
    spec = CommandSpec("example")
    spec.add_option("force", short="f", type="bool")
    spec.add_option("output", short="o")
    spec.add_argument("rest", nargs="*")

    intermixed = parse(spec, ["-f", "arg1", "-o", "v", "arg2"])
    assert intermixed.args == {"rest": ["arg1", "arg2"]}
    assert intermixed.opts == {"force": True, "output": "v"}

    strict = parse(spec, ["-f", "arg1", "-o", "v", "arg2"], mode=ParseMode.STRICT)
    assert strict.args == {"rest": ["arg1", "-o", "v", "arg2"]}
    assert strict.opts == {"force": True, "output": None}

    assert parse(spec, ["-f", "x", "-o", "v"], mode="strict") == parse(
        spec, ["-f", "x", "-o", "v"], mode=ParseMode.STRICT
    )


def test_multi_error_collection_in_encounter_order():
    spec = CommandSpec("example")
    spec.add_option("count", short="c", type="int")
    spec.add_option("name", short="n")
    spec.add_argument("port", type="int")
    result = parse(spec, ["-n", "joe", "--bogus", "-c", "ten", "http"])
    assert result.errors == [
        UnknownOption("--bogus"),
        InvalidOptionValue("-c", "ten"),
        InvalidArgument("port", "http"),
    ]
    assert result.opts == {"count": None, "name": "joe"}
    assert result.args == {}


def test_option_errors_come_before_argument_errors():
    spec = CommandSpec("example")
    spec.add_option("debug", short="d", type="bool")
    spec.add_argument("name")
    result = parse(spec, ["extra1", "extra2", "-x"])
    assert result.errors == [UnknownOption("-x"), UnknownArgument("extra2")]
    assert result.option_errors == [UnknownOption("-x")]
    assert result.argument_errors == [UnknownArgument("extra2")]


def test_missing_argument():
    spec = CommandSpec("example")
    spec.add_argument("name")
    result = parse(spec, [])
    assert not result.ok
    assert result.errors == [MissingArgument("name")]


def test_raise_for_errors():
    spec = CommandSpec("example")
    spec.add_argument("name")
    with pytest.raises(CommandArgumentError) as excinfo:
        parse(spec, []).raise_for_errors()
    assert excinfo.value.errors == [MissingArgument("name")]
    assert "1 error(s) found!" in str(excinfo.value)
    assert "missing value for argument '<NAME>'" in str(excinfo.value)

    result = parse(spec, ["joe"])
    assert result.raise_for_errors() is result


def test_parse_accepts_compiled_config():
    spec = build_http_spec()
    config = compile_config(spec)
    assert parse(config, ["example.org"]) == parse(spec, ["example.org"])


def test_command_parser_reuses_config():
    parser = CommandParser(build_http_spec())
    first = parser.parse_args(["-v", "example.org"])
    second = parser.parse_args(["-H", "X: 1", "example.org"])
    assert first.opts["verbose"] == 1
    assert first.opts["header"] == []
    assert second.opts["header"] == ["X: 1"]
    assert "http" in repr(parser)


def test_parse_invalid_mode():
    with pytest.raises(ValueError):
        parse(CommandSpec("example"), [], mode="posix")


def test_parse_subcommand_after_resolve():
    root = CommandSpec("git")
    root.add_option("verbose", short="v", type="bool")
    remote = root.add_command(CommandSpec("remote"))
    add = remote.add_command(CommandSpec("add"))
    add.add_option("fetch", short="f", type="bool")
    add.add_argument("name")
    add.add_argument("url")

    result = parse(root.resolve(["remote", "add"]), ["-vf", "origin", "git@host:repo"])
    assert result.errors == []
    assert result.opts == {"verbose": True, "fetch": True}
    assert result.args == {"name": "origin", "url": "git@host:repo"}
