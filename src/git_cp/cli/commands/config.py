import click

from git_cp.cli.output import machine_output, user_output
from git_cp.core.config import (
    config_keys,
    global_config_path,
    save_global_config,
    set_config_value,
)
from git_cp.core.context import GitCpContext


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@click.group("config")
def config_group() -> None:
    """Manage git-cp configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GitCpContext) -> None:
    """Print all configuration keys and values."""
    user_output(click.style(f"Global configuration ({global_config_path()}):", bold=True))
    for key in config_keys():
        machine_output(f"  {key}={_format_value(getattr(ctx.global_config, key))}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GitCpContext, key: str) -> None:
    """Print the value of a given configuration key."""
    if key not in config_keys():
        user_output(f"Invalid key: {key}")
        raise SystemExit(1)
    machine_output(_format_value(getattr(ctx.global_config, key)))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GitCpContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    try:
        new_config = set_config_value(ctx.global_config, key, value)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    save_global_config(new_config)
    user_output(f"Set {key}={_format_value(getattr(new_config, key))}")
