"""
Main CLI entry point.
"""

import click
import logging
import sys

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _setup(verbose, config):
    """Configure logging and build an editor factory for one run."""
    from chainsmith.engine import ChainSpecEditor, EditorConfig

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    editor_config = EditorConfig.from_file(config) if config else EditorConfig()
    context = editor_config.new_context()

    def make_editor(spec):
        return ChainSpecEditor(spec, config=editor_config, context=context)

    return make_editor


def _run(action):
    """Run `action`, turning fatal chain spec errors into exit status 1."""
    from chainsmith.core import ChainSpecError

    try:
        return action()
    except ChainSpecError as e:
        logger.error(str(e))
        sys.exit(1)


def common_options(fn):
    fn = click.option("-v", "--verbose", is_flag=True, help="Verbose output")(fn)
    fn = click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False),
                      help="Editor config file (TOML)")(fn)
    return fn


@click.group()
@click.version_option(version=__version__)
def main():
    """chainsmith: edit genesis chain specs without losing precision."""
    pass


@main.command("clear-authorities")
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@common_options
def clear_authorities(spec, config, verbose):
    """Empty the authority, collator and staker sets."""
    make_editor = _setup(verbose, config)
    _run(lambda: make_editor(spec).clear_authorities())


@main.command("add-bootnodes")
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.argument("addresses", nargs=-1)
@common_options
def add_bootnodes(spec, addresses, config, verbose):
    """Replace the boot nodes (no ADDRESSES clears them)."""
    make_editor = _setup(verbose, config)
    _run(lambda: make_editor(spec).add_boot_nodes(addresses))


@main.command()
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.argument("updates", type=click.Path(exists=True, dir_okay=False))
@common_options
def override(spec, updates, config, verbose):
    """Merge the JSON object in UPDATES into the chain spec's genesis."""
    from chainsmith.spec import codec

    make_editor = _setup(verbose, config)

    def action():
        result = make_editor(spec).change_genesis_config(codec.read(updates, "override updates"))
        if not result.ok:
            logger.warning(f"{len(result.warnings)} override key(s) were not applied")

    _run(action)


@main.command("add-para")
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.argument("para_id", type=int)
@click.argument("head", type=click.Path(exists=True, dir_okay=False))
@click.argument("wasm", type=click.Path(exists=True, dir_okay=False))
@click.option("--parathread", is_flag=True, help="Register as a parathread instead of a parachain")
@common_options
def add_para(spec, para_id, head, wasm, parathread, config, verbose):
    """Register a parachain from HEAD and WASM files."""
    from chainsmith.engine import read_payload_file

    make_editor = _setup(verbose, config)
    _run(lambda: make_editor(spec).add_parachain(
        para_id, head, wasm,
        parachain=not parathread,
        loader=read_payload_file,
    ))


def _parse_channel(ctx, param, values):
    from chainsmith.mutations import HrmpChannel

    try:
        return [HrmpChannel.parse(value) for value in values]
    except ValueError as e:
        raise click.BadParameter(str(e))


@main.command("add-hrmp")
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@click.argument("channels", nargs=-1, required=True, callback=_parse_channel)
@common_options
def add_hrmp(spec, channels, config, verbose):
    """Preopen HRMP channels given as SENDER:RECIPIENT:CAPACITY:SIZE."""
    make_editor = _setup(verbose, config)
    _run(lambda: make_editor(spec).add_hrmp_channels(channels))


@main.command("has-session-keys")
@click.argument("spec", type=click.Path(exists=True, dir_okay=False))
@common_options
def has_session_keys(spec, config, verbose):
    """Print whether the runtime is configured through session keys."""
    make_editor = _setup(verbose, config)
    found = _run(lambda: make_editor(spec).has_session_keys())
    click.echo("true" if found else "false")


if __name__ == "__main__":
    main()
