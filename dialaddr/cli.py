"""CLI entry point for the dialaddr tool."""

import logging
import sys

import click

from dialaddr.classify import all_ipv4, all_ipv6, global_unicast_ip
from dialaddr.config import ConfigError, DialConfig, load_config
from dialaddr.errors import ResolveError
from dialaddr.lookup import LookupFn, build_lookup
from dialaddr.models import Classification, Resolution
from dialaddr.output import FORMATS, render_classification, render_resolutions
from dialaddr.resolver import FAMILIES, resolve_addr

logger = logging.getLogger(__name__)

_format_option = click.option(
    "--format",
    "-f",
    "output_format",
    default="table",
    type=click.Choice(FORMATS, case_sensitive=False),
    show_default=True,
    help="Output format.",
)


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to YAML config file (default: ~/.dialaddr/config.yaml).",
)
@click.pass_context
def main(ctx: click.Context, config_path: str | None) -> None:
    """Resolve host:port strings into dialable ip:port addresses."""
    try:
        cfg = load_config(config_path)
    except (ConfigError, FileNotFoundError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(levelname)s: %(message)s",
    )
    logger.debug("Config loaded: %s", cfg)
    ctx.obj = cfg


@main.command()
@click.argument("addresses", nargs=-1, required=True)
@click.option(
    "--prefer",
    "-p",
    default=None,
    type=click.Choice(FAMILIES, case_sensitive=False),
    help="Address family to pick when a name has both (default: from config).",
)
@_format_option
@click.pass_obj
def resolve(
    cfg: DialConfig,
    addresses: tuple[str, ...],
    prefer: str | None,
    output_format: str,
) -> None:
    """Resolve each ADDRESS (host:port or [ipv6]:port)."""
    lookup = build_lookup(cfg)
    family = (prefer or cfg.prefer_family).lower()

    results = [_resolve_one(addr, lookup, family) for addr in addresses]
    render_resolutions(results, output_format.lower())

    if not all(r.ok for r in results):
        sys.exit(1)


@main.command()
@click.argument("addresses", nargs=-1)
@_format_option
def classify(addresses: tuple[str, ...], output_format: str) -> None:
    """Report the address family make-up of the given IP literals."""
    addrs = list(addresses)
    result = Classification(
        addresses=addrs,
        all_ipv4=all_ipv4(addrs),
        all_ipv6=all_ipv6(addrs),
        global_unicast=global_unicast_ip(addrs),
    )
    render_classification(result, output_format.lower())


def _resolve_one(address: str, lookup: LookupFn, family: str) -> Resolution:
    """Resolve one address, capturing a ``ResolveError`` in the result."""
    try:
        resolved = resolve_addr(address, lookup, prefer=family)
    except ResolveError as exc:
        logger.info("Could not resolve %r: %s", address, exc)
        return Resolution(
            address=address,
            error=str(exc),
            error_kind=type(exc).__name__,
        )
    return Resolution(address=address, resolved=resolved)
