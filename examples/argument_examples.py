"""argument_examples.py"""

import sys
from ipaddress import ip_address
from pathlib import Path

from argsmith import CommandArgumentError, CommandSpec, parse
from argsmith.feedback import format_errors, help


def port(value: str) -> int:
    number = int(value)
    if not 0 < number < 65536:
        raise ValueError(f"{number} is not a valid port")
    return number


def build_spec() -> CommandSpec:
    """A small deploy tool with a nested `remote add` command."""
    deploy = CommandSpec(
        "deploy",
        summary="Deploy services to remote hosts.",
        description=(
            "Every subcommand inherits the options of its parents, so "
            "`deploy up -vv web` works as expected."
        ),
    )
    deploy.add_option(
        "verbose",
        short="v",
        long="verbose",
        type="bool",
        action="count",
        help="increase output verbosity",
    )
    deploy.add_option(
        "config",
        short="c",
        long="config",
        type=Path,
        value_name="FILE",
        help="path to the configuration file",
    )
    deploy.add_option(
        "tag",
        short="t",
        long="tag",
        action="append",
        help="tag the deployment, may be repeated",
    )
    up = CommandSpec("up", help="deploy a service")
    up.add_argument("service", help="service name to deploy")
    up.add_argument("hosts", nargs="*", value_name="HOST", help="target hosts")
    deploy.add_command(up)

    remote = CommandSpec("remote", help="manage remote hosts")
    add = CommandSpec("add", help="register a remote host")
    add.add_option("dry_run", short="n", long="dry-run", type="bool")
    add.add_option("port", short="p", long="port", type=port, default=22)
    add.add_argument("name", help="name of the remote")
    add.add_argument("address", type=ip_address, help="IP address of the remote")
    remote.add_command(add)
    deploy.add_command(remote)
    return deploy


if __name__ == "__main__":
    spec = build_spec()
    print(help(spec, ["remote", "add"]))
    print()

    add = spec.resolve(["remote", "add"])
    result = parse(add, ["-vv", "origin", "10.0.0.1", "--port", "2222", "-n"])
    print(result.args, result.opts)

    result = parse(add, ["origin", "not-an-ip", "--port", "99999", "--nope"])
    print(format_errors(result.errors))

    try:
        parse(spec.resolve(["up"]), sys.argv[1:]).raise_for_errors()
    except CommandArgumentError as error:
        print(error)
        sys.exit(1)
