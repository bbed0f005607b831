#!/usr/bin/env python3
"""
Linkerd CLI - Main entry point
"""

import click
import logging
import sys
from pathlib import Path
from rich.console import Console

from linkerd.api.client import PublicApiClient
from linkerd.version.check import get_server_version
from linkerd.version.config import VersionCheckConfig
from linkerd.version.errors import TransportError, VersionCheckError
from linkerd.version.healthcheck import VersionHealthChecker
from linkerd.version.running import RunningVersion

console = Console()

@click.group()
@click.option('--debug', is_flag=True, help='Enable debug output')
@click.option('--config-dir', type=click.Path(file_okay=False), help='Config directory (default: ~/.linkerd)')
@click.pass_context
def cli(ctx, debug, config_dir):
    """Linkerd - check CLI and control plane versions"""
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['console'] = console
    ctx.obj['config_dir'] = Path(config_dir) if config_dir else None
    # Resolved once here and handed to every command
    ctx.obj['running'] = RunningVersion.resolve()

def _load_config(ctx) -> VersionCheckConfig:
    return VersionCheckConfig(config_dir=ctx.obj['config_dir'])

@cli.command()
@click.option('--client', 'client_only', is_flag=True, help='Print the client version only')
@click.option('--short', is_flag=True, help='Print the version number(s) only')
@click.option('--api-addr', help='Control plane public API address')
@click.pass_context
def version(ctx, client_only, short, api_addr):
    """Print the client and control plane versions

    Examples:
        linkerd version
        linkerd version --client --short
    """
    running = ctx.obj['running']

    if short:
        click.echo(running.value)
    else:
        click.echo(f"Client version: {running.value}")

    if client_only:
        return

    config = _load_config(ctx)
    api = PublicApiClient(api_addr or config.api_addr, verify_tls=config.verify_tls)
    try:
        server_version = get_server_version(api, timeout=config.timeout_seconds)
    except (TransportError, VersionCheckError) as e:
        if ctx.obj['debug']:
            console.print(f"[yellow]Control plane version request failed: {e}[/yellow]")
        server_version = "unavailable"
    finally:
        api.close()

    if short:
        click.echo(server_version)
    else:
        click.echo(f"Server version: {server_version}")

@cli.command()
@click.option('--expected-version', help='Compare against this version instead of the latest release')
@click.option('--api-addr', help='Control plane public API address')
@click.option('--source', default='cli', help='Source tag reported to the versioncheck feed')
@click.option('--pre', is_flag=True, help='Only check the CLI, not the control plane')
@click.pass_context
def check(ctx, expected_version, api_addr, source, pre):
    """Check that the CLI and control plane are up-to-date

    Examples:
        linkerd check
        linkerd check --expected-version stable-2.9.0
        linkerd check --pre
    """
    running = ctx.obj['running']
    config = _load_config(ctx)

    api = None
    if not pre:
        api = PublicApiClient(api_addr or config.api_addr, verify_tls=config.verify_tls)

    console.print("[bold]linkerd-version[/bold]")
    console.print("---------------")

    checker = VersionHealthChecker(running, config, api=api, source=source)
    try:
        results = checker.run(expected_version=expected_version)
    finally:
        if api is not None:
            api.close()

    failed = False
    for result in results:
        if result.skipped:
            console.print(f"[yellow]‼ {result.description}[/yellow]")
            console.print("    skipped: expected version unknown")
            failed = True
        elif result.success:
            console.print(f"[green]√ {result.description}[/green]")
        else:
            console.print(f"[red]× {result.description}[/red]")
            console.print(f"    {result.error}", markup=False)
            failed = True

    if failed:
        console.print("\n[bold red]Status check results are ×[/bold red]")
        sys.exit(1)

    console.print("\n[bold green]Status check results are √[/bold green]")

@cli.command()
@click.option('--host', default='0.0.0.0', help='Host to bind')
@click.option('--port', default=8085, type=int, help='Port to bind')
@click.pass_context
def serve(ctx, host, port):
    """Start API server for the control plane

    Examples:
        linkerd serve
        linkerd serve --port 9995
    """
    import uvicorn
    from linkerd.api.server import create_app

    running = ctx.obj['running']
    console.print(f"[bold blue]Starting Linkerd public API {running.value} on {host}:{port}[/bold blue]")

    app = create_app(running, debug=ctx.obj['debug'])
    uvicorn.run(app, host=host, port=port, log_level='info')

def main():
    """Main entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        sys.exit(1)

if __name__ == "__main__":
    main()
