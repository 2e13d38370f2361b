"""
Command-line interface for pulse-prototype.
Prints the script tags generated by the observer helpers.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

from typing import Any

import typer

from pulse_prototype.context import PrototypeContext
from pulse_prototype.errors import PrototypeHelperError
from pulse_prototype.observers import (
	observe_field,
	observe_form,
	periodically_call_remote,
)
from pulse_prototype.urls import UrlBuilder

cli = typer.Typer(
	name="pulse-prototype",
	help="Generate Prototype.js observer and remote-call snippets",
	no_args_is_help=True,
)


def _context(base_url: str | None, no_cdata: bool) -> PrototypeContext:
	ctx = PrototypeContext()
	if base_url:
		ctx.urls = UrlBuilder(base_url=base_url.rstrip("/"))
	if no_cdata:
		ctx.cdata = False
	return ctx


def _options(
	frequency: str | None,
	url: str | None,
	update: str | None,
	with_: str | None,
	function: str | None,
) -> dict[str, Any]:
	options: dict[str, Any] = {"url": url}
	if frequency is not None:
		options["frequency"] = frequency
	if update is not None:
		options["update"] = update
	if with_ is not None:
		options["with_"] = with_
	if function is not None:
		options["function"] = function
	return options


def _emit(ctx: PrototypeContext, render: Any, *args: Any) -> None:
	try:
		with ctx:
			typer.echo(render(*args))
	except PrototypeHelperError as e:
		typer.echo(f"❌ {e}", err=True)
		raise typer.Exit(1) from e


@cli.command("observe-field")
def observe_field_cmd(
	field_id: str = typer.Argument(..., help="DOM id of the observed field"),
	frequency: str | None = typer.Option(None, "--frequency", "-f", help="Interval in seconds"),
	url: str | None = typer.Option(None, "--url", "-u", help="URL of the remote call"),
	update: str | None = typer.Option(None, "--update", help="DOM id updated with the response"),
	with_: str | None = typer.Option(None, "--with", help="Parameters expression or key"),
	function: str | None = typer.Option(None, "--function", help="JavaScript callback body"),
	base_url: str | None = typer.Option(None, "--base-url", help="Base URL of generated URLs"),
	no_cdata: bool = typer.Option(False, "--no-cdata", help="Omit the CDATA wrapper"),
):
	"""Observe a form field."""
	options = _options(frequency, url, update, with_, function)
	_emit(_context(base_url, no_cdata), observe_field, field_id, options)


@cli.command("observe-form")
def observe_form_cmd(
	form_id: str = typer.Argument(..., help="DOM id of the observed form"),
	frequency: str | None = typer.Option(None, "--frequency", "-f", help="Interval in seconds"),
	url: str | None = typer.Option(None, "--url", "-u", help="URL of the remote call"),
	update: str | None = typer.Option(None, "--update", help="DOM id updated with the response"),
	with_: str | None = typer.Option(None, "--with", help="Parameters expression or key"),
	function: str | None = typer.Option(None, "--function", help="JavaScript callback body"),
	base_url: str | None = typer.Option(None, "--base-url", help="Base URL of generated URLs"),
	no_cdata: bool = typer.Option(False, "--no-cdata", help="Omit the CDATA wrapper"),
):
	"""Observe a whole form."""
	options = _options(frequency, url, update, with_, function)
	_emit(_context(base_url, no_cdata), observe_form, form_id, options)


@cli.command("periodically-call-remote")
def periodically_call_remote_cmd(
	frequency: str | None = typer.Option(None, "--frequency", "-f", help="Interval in seconds"),
	url: str | None = typer.Option(None, "--url", "-u", help="URL of the remote call"),
	update: str | None = typer.Option(None, "--update", help="DOM id updated with the response"),
	base_url: str | None = typer.Option(None, "--base-url", help="Base URL of generated URLs"),
	no_cdata: bool = typer.Option(False, "--no-cdata", help="Omit the CDATA wrapper"),
):
	"""Call a URL periodically."""
	options = _options(frequency, url, update, None, None)
	_emit(_context(base_url, no_cdata), periodically_call_remote, options)


def main():
	"""Main entry point for the CLI."""
	cli()


if __name__ == "__main__":
	main()
