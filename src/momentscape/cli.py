"""Command-line interface for the MomentScape notes client."""

import shlex
from typing import Annotated

import typer
from loguru import logger

from momentscape.api import NotesApi
from momentscape.config import API_URL_ENV, DEFAULT_API_URL, PROBE_TIMEOUT
from momentscape.core.controller import NoteController
from momentscape.core.probe import ConnectivityProber
from momentscape.core.render import render_collection, render_error, render_note, render_session
from momentscape.logging_config import configure_logging
from momentscape.models.session import ConnectivityState, ErrorKind

app = typer.Typer(help="MomentScape: keep short notes on your notes server.")

SHELL_HELP = """\
Commands:
  list            show all notes
  new             compose a new note
  edit N          edit note number N
  save            submit the current draft again
  cancel          drop the current draft
  delete N        delete note number N
  dismiss         hide the last error
  reload          fetch notes from the server again
  help            show this text
  quit            leave the shell"""


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    base_url: Annotated[
        str | None,
        typer.Option(
            "--base-url",
            "-u",
            help=f"Notes server base URL (else ${API_URL_ENV}, else {DEFAULT_API_URL})",
        ),
    ] = None,
) -> None:
    # The environment is consulted by resolve_base_url only.
    configure_logging(verbose=verbose)
    ctx.obj = base_url


def _report(controller: NoteController) -> bool:
    """Print the surfaced error, if any. Returns True if there was one."""
    if controller.error is None:
        return False
    typer.secho(render_error(controller.error), fg=typer.colors.RED, err=True)
    return True


def _open_session(base_url: str | None) -> NoteController:
    """Probe the server and load notes; exit on failure."""
    api = NotesApi(base_url)
    controller = NoteController(api)
    controller.start(ConnectivityProber(api, timeout=PROBE_TIMEOUT))
    if _report(controller):
        raise typer.Exit(1)
    return controller


@app.command()
def check(ctx: typer.Context) -> None:
    """Check whether the notes server is reachable."""
    api = NotesApi(ctx.obj)
    prober = ConnectivityProber(api, timeout=PROBE_TIMEOUT)
    if prober.probe() is ConnectivityState.CONNECTED:
        typer.echo(f"connected to {api.base_url}")
        return
    typer.secho(prober.message, fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.command(name="list")
def list_cmd(ctx: typer.Context) -> None:
    """Show all notes."""
    controller = _open_session(ctx.obj)
    typer.echo(render_collection(controller.notes), nl=False)


@app.command()
def add(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Note title")],
    body: Annotated[str, typer.Argument(help="Note text")],
) -> None:
    """Create a note."""
    controller = _open_session(ctx.obj)
    if not controller.submit(title, body):
        if not _report(controller):
            typer.secho("Title and body must not be empty.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(render_note(controller.notes[0]), nl=False)


@app.command()
def edit(
    ctx: typer.Context,
    note_id: Annotated[str, typer.Argument(help="ID of the note to edit")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    body: Annotated[str | None, typer.Option("--body", "-b", help="New text")] = None,
) -> None:
    """Change the title and/or text of a note."""
    controller = _open_session(ctx.obj)
    note = controller.find(note_id)
    if note is None:
        logger.error("No note with id {}", note_id)
        raise typer.Exit(1)

    controller.begin_edit(note)
    controller.set_draft(title=title, body=body)
    draft = controller.session
    if not controller.submit(draft.title, draft.body):
        if not _report(controller):
            typer.secho("Title and body must not be empty.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    updated = controller.find(note_id)
    if updated is not None:
        typer.echo(render_note(updated), nl=False)


@app.command()
def delete(
    ctx: typer.Context,
    note_id: Annotated[str, typer.Argument(help="ID of the note to delete")],
) -> None:
    """Delete a note."""
    controller = _open_session(ctx.obj)
    if not controller.delete_note(note_id):
        _report(controller)
        raise typer.Exit(1)
    typer.echo(f"Deleted {note_id}")


@app.command()
def shell(ctx: typer.Context) -> None:
    """Interactive session: list, compose, edit and delete notes."""
    controller = _open_session(ctx.obj)
    typer.echo(render_collection(controller.notes), nl=False)
    typer.echo("Type 'help' for commands.")

    while True:
        try:
            line = typer.prompt("notes", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            break
        try:
            words = shlex.split(line)
        except ValueError as e:
            typer.echo(f"Cannot parse command: {e}")
            continue
        if not words:
            continue
        if not _run_shell_command(controller, words[0], words[1:]):
            break
        _report(controller)


def _note_at(controller: NoteController, args: list[str]) -> str | None:
    """Resolve a 1-based position argument to a note id."""
    if len(args) != 1 or not args[0].isdigit():
        typer.echo("Expected a note number, see 'list'.")
        return None
    position = int(args[0])
    if not 1 <= position <= len(controller.notes):
        typer.echo(f"No note #{position}.")
        return None
    return controller.notes[position - 1].id


def _prompt_and_submit(controller: NoteController) -> None:
    typer.echo(render_session(controller.session), nl=False)
    draft = controller.session
    title = typer.prompt("title", default=draft.title or None)
    body = typer.prompt("body", default=draft.body or None)
    controller.set_draft(title=title, body=body)
    _submit_draft(controller)


def _submit_draft(controller: NoteController) -> None:
    draft = controller.session
    if controller.submit(draft.title, draft.body):
        typer.echo("Saved.")
    elif controller.error is None:
        typer.echo("Nothing saved: title and body must not be empty.")


def _run_shell_command(controller: NoteController, command: str, args: list[str]) -> bool:
    """Run one shell command. Returns False when the shell should exit."""
    match command:
        case "quit" | "exit":
            return False
        case "help":
            typer.echo(SHELL_HELP)
        case "list":
            typer.echo(render_collection(controller.notes), nl=False)
        case "new":
            if controller.session.is_editing:
                controller.cancel_edit()
            _prompt_and_submit(controller)
        case "edit":
            note_id = _note_at(controller, args)
            note = controller.find(note_id) if note_id else None
            if note is not None:
                controller.begin_edit(note)
                _prompt_and_submit(controller)
        case "save":
            _submit_draft(controller)
        case "cancel":
            controller.cancel_edit()
        case "delete":
            note_id = _note_at(controller, args)
            if note_id and controller.delete_note(note_id):
                typer.echo(f"Deleted {note_id}")
        case "dismiss":
            controller.dismiss_error()
        case "reload":
            if controller.load_all():
                typer.echo(render_collection(controller.notes), nl=False)
        case _:
            typer.echo(f"Unknown command {command!r}, try 'help'.")

    return not (controller.error and controller.error.kind is ErrorKind.CONNECTIVITY)
