import click
from hexbytes import HexBytes
from pydantic import TypeAdapter

from tick_helper.cli import cli
from tick_helper.cli.utils import get_web3_from_config, parse_block_identifier
from tick_helper.config import settings
from tick_helper.exceptions import TickHelperError
from tick_helper.packing import unpack_tick
from tick_helper.sources import UniswapV3PoolTickSource
from tick_helper.tick_helper import get_ticks
from tick_helper.v3_types import PackedTick


def _echo_blobs(blobs: list[bytes], *, as_json: bool) -> None:
    if as_json:
        click.echo(
            TypeAdapter(list[PackedTick]).dump_json(
                [unpack_tick(blob) for blob in blobs],
                indent=2,
            ),
        )
    else:
        for blob in blobs:
            click.echo(HexBytes(blob).to_0x_hex())


@cli.command("ticks")
@click.argument("pool_address")
@click.option(
    "--chain-id",
    "chain_id",
    type=int,
    required=True,
    help="Chain ID of the pool. An RPC for this chain must be defined in the config file.",
)
@click.option(
    "--range",
    "range_multiplier",
    type=int,
    default=None,
    help="Number of tick spacings to scan on either side of the current tick "
    "(default from config).",
)
@click.option(
    "--tick-spacing",
    "tick_spacing",
    type=int,
    default=None,
    help="Tick spacing of the pool (default: read from the pool).",
)
@click.option(
    "--block",
    "block",
    metavar="INTEGER | TEXT",
    default="latest",
    help="The block to read. Can be a number or an identifier: 'latest' (default), 'finalized', "
    "'safe'",
)
@click.option("--json", "as_json", is_flag=True, help="Print decoded ticks as JSON")
def ticks_get(
    pool_address: str,
    chain_id: int,
    range_multiplier: int | None,
    tick_spacing: int | None,
    block: str,
    *,
    as_json: bool,
) -> None:
    """
    Print a packed blob for each initialized tick around the current tick of a pool.
    """

    if range_multiplier is None:
        range_multiplier = settings.query.range_multiplier

    try:
        w3 = get_web3_from_config(chain_id=chain_id)
        block_identifier = parse_block_identifier(block)
        if isinstance(block_identifier, str):
            # Pin the tag to a number so every read sees the same block
            block_identifier = w3.eth.get_block(block_identifier)["number"]

        tick_source = UniswapV3PoolTickSource(
            address=pool_address,
            w3=w3,
            block_identifier=block_identifier,
        )
        if tick_spacing is None:
            tick_spacing = tick_source.tick_spacing
        blobs = get_ticks(
            tick_source=tick_source,
            range_multiplier=range_multiplier,
            tick_spacing=tick_spacing,
        )
    except TickHelperError as exc:
        raise click.ClickException(exc.message or str(exc)) from exc
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    _echo_blobs(blobs, as_json=as_json)


@cli.command("decode")
@click.argument("blobs", nargs=-1, required=True)
def ticks_decode(blobs: tuple[str, ...]) -> None:
    """
    Decode one or more hex-encoded packed tick blobs to JSON.
    """

    try:
        decoded = [unpack_tick(HexBytes(blob)) for blob in blobs]
    except (TickHelperError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(
        TypeAdapter(list[PackedTick]).dump_json(
            decoded,
            indent=2,
        ),
    )
