import pytest

from argsmith.feedback import (
    format_error,
    format_errors,
    help,
    render_errors,
    render_help,
)
from argsmith.parser.errors import (
    InvalidArgument,
    InvalidOptionValue,
    MissingArgument,
    MissingOptionValue,
    UnknownArgument,
    UnknownOption,
)
from argsmith.parser.parser_types import ArgType, Arity
from argsmith.parser.spec import CommandSpec


@pytest.fixture
def spec():
    calc = CommandSpec(
        "calc",
        summary="A simple calculator.",
        description="This calculator is for demonstrating the help generator.",
        epilogue="For more help, read the manual.\n",
    )
    calc.add_option(
        "mode",
        short="m",
        long="mode",
        help="specify the mode. Available modes: simple, science",
    )
    calc.add_option(
        "debug", short="d", long="debug", type="bool", help="enable debug logging"
    )
    calc.add_option(
        "verbose",
        short="v",
        long="verbose",
        type="bool",
        action="count",
        help="specify verbose level",
    )

    add = calc.add_command(
        CommandSpec("add", summary="Add numbers.", help="add numbers")
    )
    add.add_argument("numbers", type="int", nargs="+", help="the numbers")

    minus = calc.add_command(
        CommandSpec("minus", summary="Minus two number.", help="minus two number")
    )
    minus.add_argument("left", type="int", help="the left number")
    minus.add_argument("right", type="int", help="the right number")
    return calc


OPTIONS_SECTION = (
    "Options:\n"
    "  -m, --mode <MODE>  specify the mode. Available modes: simple, science\n"
    "  -d, --debug        enable debug logging\n"
    "  -v, --verbose...   specify verbose level"
)


def test_help_root(spec):
    assert help(spec, width=98) == (
        "A simple calculator.\n"
        "\n"
        "This calculator is for demonstrating the help generator.\n"
        "\n"
        "Usage:\n"
        "  calc <COMMAND> [OPTIONS]\n"
        "\n"
        "Commands:\n"
        "  add    add numbers\n"
        "  minus  minus two number\n"
        "\n" + OPTIONS_SECTION + "\n"
        "\n"
        "For more help, read the manual."
    )


def test_help_subcommand(spec):
    assert help(spec, ["add"], width=98) == (
        "Add numbers.\n"
        "\n"
        "Usage:\n"
        "  calc add [OPTIONS] <NUMBERS>...\n"
        "\n"
        "Arguments:\n"
        "  <NUMBERS>...  the numbers\n"
        "\n" + OPTIONS_SECTION
    )

    assert help(spec, ["minus"], width=98) == (
        "Minus two number.\n"
        "\n"
        "Usage:\n"
        "  calc minus [OPTIONS] <LEFT> <RIGHT>\n"
        "\n"
        "Arguments:\n"
        "  <LEFT>   the left number\n"
        "  <RIGHT>  the right number\n"
        "\n" + OPTIONS_SECTION
    )


def test_help_wraps_help_column(spec):
    text = help(spec, width=40)
    assert (
        "  -m, --mode <MODE>  specify the mode.\n"
        "                     Available modes:\n"
        "                     simple, science\n"
    ) in text


def test_help_minimal_command():
    assert help(CommandSpec("tool")) == "Usage:\n  tool"


def test_help_placeholders():
    spec = CommandSpec("http")
    spec.add_argument("method", nargs="?")
    spec.add_argument("url")
    spec.add_argument("items", nargs="*", value_name="REQUEST_ITEM")
    assert help(spec, width=80).startswith(
        "Usage:\n  http [METHOD] <URL> [REQUEST_ITEM]..."
    )


def test_help_long_only_and_valued_options():
    spec = CommandSpec("tool")
    spec.add_option("output", long="output", value_name="FILE", help="write here")
    spec.add_option("level", short="l", type="int", help="level")
    assert help(spec, width=80).endswith(
        "Options:\n"
        "      --output <FILE>  write here\n"
        "  -l <LEVEL>           level"
    )


def test_format_error_arguments():
    assert format_error(UnknownArgument("joe")) == "unrecognized argument 'joe'"
    assert (
        format_error(MissingArgument("name", nargs=Arity.ONE, value_name="NAME"))
        == "missing value for argument '<NAME>'"
    )


@pytest.mark.parametrize(
    "nargs, expected",
    [
        (Arity.ONE, "invalid value 'joe' for argument '<NAME>'"),
        (Arity.OPTIONAL, "invalid value 'joe' for argument '[NAME]'"),
        (Arity.ZERO_OR_MORE, "invalid value 'joe' for argument '[NAME]...'"),
        (Arity.ONE_OR_MORE, "invalid value 'joe' for argument '<NAME>...'"),
    ],
)
def test_format_error_invalid_argument(nargs, expected):
    error = InvalidArgument(
        "name", "joe", type=ArgType.STRING, nargs=nargs, value_name="NAME"
    )
    assert format_error(error) == expected


def test_format_error_invalid_argument_with_message():
    error = InvalidArgument(
        "name",
        "joe",
        nargs=Arity.ONE_OR_MORE,
        value_name="NAME",
        message="invalid name",
    )
    assert format_error(error) == (
        "invalid value 'joe' for argument '<NAME>...': invalid name"
    )


def test_format_error_options():
    assert format_error(UnknownOption("--unknown")) == "unknown option '--unknown'"
    assert (
        format_error(MissingOptionValue("--name", key="name", value_name="NAME"))
        == "missing value for option '--name <NAME>'"
    )
    assert (
        format_error(InvalidOptionValue("--name", "bad_name", value_name="NAME"))
        == "invalid value 'bad_name' for option '--name <NAME>'"
    )
    assert (
        format_error(
            InvalidOptionValue(
                "--name", "bad_name", value_name="NAME", message="invalid format"
            )
        )
        == "invalid value 'bad_name' for option '--name <NAME>': invalid format"
    )


def test_format_error_falls_back_to_key():
    assert format_error(MissingArgument("dst")) == "missing value for argument '<DST>'"


def test_format_error_unsupported():
    with pytest.raises(TypeError):
        format_error("not an error")


def test_format_errors():
    text = format_errors([UnknownOption("-x"), UnknownArgument("y")])
    assert text == (
        "2 error(s) found!\n"
        "  unknown option '-x'\n"
        "  unrecognized argument 'y'"
    )


def test_render_help(spec, capsys):
    render_help(spec, ["add"], width=98)
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "calc add [OPTIONS] <NUMBERS>..." in out


def test_render_errors(capsys):
    render_errors([UnknownOption("--bogus")])
    out = capsys.readouterr().out
    assert "1 error(s) found!" in out
    assert "unknown option '--bogus'" in out
