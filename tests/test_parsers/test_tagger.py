from argsmith.parser.compiled_config import compile_config
from argsmith.parser.spec import CommandSpec
from argsmith.parser.tagger import OptionKind, tag_option


def build_config():
    spec = CommandSpec("example")
    spec.add_option("debug", short="d", long="debug", type="bool")
    spec.add_option("name", short="n", long="name")
    spec.add_option("no_cache", long="no-cache")
    spec.add_option("color", long="color")
    return compile_config(spec)


def test_tag_short_option():
    config = build_config()
    tagged = tag_option(config, OptionKind.SHORT, "d")
    assert tagged.option.key == "debug"
    assert not tagged.negated
    assert not tagged.takes_value

    tagged = tag_option(config, OptionKind.SHORT, "n")
    assert tagged.option.key == "name"
    assert tagged.takes_value


def test_tag_long_option():
    config = build_config()
    assert tag_option(config, OptionKind.LONG, "name").option.key == "name"


def test_tag_unknown_option():
    config = build_config()
    assert tag_option(config, OptionKind.SHORT, "x") is None
    assert tag_option(config, OptionKind.LONG, "missing") is None
    assert tag_option(config, OptionKind.LONG, "d") is None


def test_tag_negated_boolean():
    config = build_config()
    tagged = tag_option(config, OptionKind.LONG, "no-debug")
    assert tagged.option.key == "debug"
    assert tagged.negated
    assert tagged.name == "debug"


def test_tag_negation_only_for_booleans():
    config = build_config()
    assert tag_option(config, OptionKind.LONG, "no-color") is None
    assert tag_option(config, OptionKind.LONG, "no-name") is None


def test_tag_literal_no_prefixed_option():
    config = build_config()
    tagged = tag_option(config, OptionKind.LONG, "no-cache")
    assert tagged.option.key == "no_cache"
    assert not tagged.negated
