"""
CLI for the Node Web Gateway
============================

Commands:
    nodeweb serve                  Run the HTTP gateway
    nodeweb stage <slot_index>     Show the SSC stage of a slot index
    nodeweb config                 Print the effective configuration
"""

import logging
import sys
from typing import Optional

import click

from nodeweb import __version__
from nodeweb.config import GatewayConfig, print_config_summary, validate_config
from nodeweb.utils.slotting import SlotPhaseClassifier


def _load_config() -> GatewayConfig:
    try:
        config = GatewayConfig.from_env()
        validate_config(config)
    except ValueError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    return config


@click.group()
@click.version_option(version=__version__)
def main():
    """
    Node Web Gateway - HTTP view of node state

    Examples:
        nodeweb serve --port 8090
        nodeweb serve --base-only
        nodeweb stage 3
    """
    pass


@main.command()
@click.option("--host", default=None, help="Bind host (default: NODEWEB_HOST)")
@click.option("--port", "-p", type=int, default=None, help="Bind port (default: NODEWEB_PORT)")
@click.option("--base-only", is_flag=True, help="Serve base endpoints only (no /ssc routes)")
@click.option("--no-request-logging", is_flag=True, help="Do not log every request")
def serve(host: Optional[str], port: Optional[int], base_only: bool, no_request_logging: bool):
    """
    Run the gateway over in-memory node state and a wall-clock slot oracle.
    """
    import uvicorn

    from nodeweb.main import build_gateway, create_app

    config = _load_config()
    if host is not None:
        config.HOST = host
    if port is not None:
        config.PORT = port
    if base_only:
        config.ENABLE_SSC = False
    if no_request_logging:
        config.REQUEST_LOGGING = False

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print_config_summary(config)

    app = create_app(build_gateway(config), config)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


@main.command()
@click.argument("slot_index", type=click.IntRange(min=0))
def stage(slot_index: int):
    """
    Show the SSC stage of SLOT_INDEX under the configured windows.
    """
    config = _load_config()
    classifier = SlotPhaseClassifier(config.get_ssc_windows())
    click.echo(classifier.classify(slot_index).value)


@main.command(name="config")
def show_config():
    """
    Print the effective configuration.
    """
    print_config_summary(_load_config())


if __name__ == "__main__":
    main()
