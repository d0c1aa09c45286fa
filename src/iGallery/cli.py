"""Typer-based CLI entry point."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape

from iGallery.di.bootstrap import create_container
from iGallery.di.container import Container
from iGallery.domain.models import BatchDeleteResult, GalleryStatus
from iGallery.errors import BatchDeleteError, GalleryError, NetworkError, SettingsError
from iGallery.gui.factories.viewmodel_factory import ViewModelFactory
from iGallery.gui.services.ui_commands import ConfirmRequest, UiCommandChannel
from iGallery.gui.viewmodels.gallery_viewmodel import GalleryViewModel
from iGallery.settings.manager import SettingsManager
from iGallery.utils.logging import configure_logging

app = typer.Typer(help="Browse and bulk-delete images of a remote dataset")

_state: dict = {"api_url": None}


def _create_container(api_url: Optional[str]) -> Container:
    settings = SettingsManager()
    settings.load()
    return create_container(settings, api_url=api_url)


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (BatchDeleteError, NetworkError, SettingsError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except GalleryError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _print_images(vm: GalleryViewModel) -> None:
    images = vm.visible_images
    if not images:
        print("[yellow]No images found")
        return
    for entry in images:
        typer.echo(entry.path)


@app.callback()
def main(
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Dataset server base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    _state["api_url"] = api_url


@app.command("list")
@_handle_errors
def list_images(dataset: str = typer.Argument(..., help="Dataset name")) -> None:
    """Print the images of DATASET, sorted by path."""

    container = _create_container(_state["api_url"])
    vm = ViewModelFactory(container).create_gallery_vm()
    try:
        asyncio.run(vm.mount(dataset))
        if vm.status.value is GalleryStatus.ERROR:
            raise NetworkError(vm.error_message.value or "Error fetching images")
        _print_images(vm)
    finally:
        vm.dispose()


@app.command()
@_handle_errors
def delete(
    dataset: str = typer.Argument(..., help="Dataset name"),
    paths: List[str] = typer.Argument(..., help="Image paths to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete PATHS from DATASET, then print the remaining images."""

    container = _create_container(_state["api_url"])
    commands = UiCommandChannel()
    requests: list[ConfirmRequest] = []
    commands.confirm_requested.connect(requests.append)
    vm = ViewModelFactory(container).create_gallery_vm(commands)

    async def _run() -> Optional[BatchDeleteResult]:
        await vm.mount(dataset)
        if vm.status.value is GalleryStatus.ERROR:
            raise NetworkError(vm.error_message.value or "Error fetching images")
        for path in paths:
            vm.toggle(path, True)
        for path in paths:
            if path not in vm.selection:
                print(f"[yellow]Skipping {escape(path)}: not in dataset {escape(dataset)}")
        if vm.request_delete_selected() is None:
            return None
        request = requests.pop()
        if not yes and not typer.confirm(request.message, default=False):
            request.reject()
            return None
        return await request.on_confirm()

    try:
        result = asyncio.run(_run())
        if result is None:
            print("[yellow]Nothing deleted")
            return
        print(f"[green]Deleted {len(result.deleted_paths)} of {result.requested} images")
        for path in result.failed_paths:
            print(f"[red]Failed: {escape(path)}")
        _print_images(vm)
        if not result.succeeded:
            raise BatchDeleteError(
                f"{len(result.failed_paths)} of {result.requested} deletions failed", result
            )
    finally:
        vm.dispose()


@app.command()
def gui(dataset: Optional[str] = typer.Argument(None, help="Dataset name")) -> None:
    """Open the desktop viewer for DATASET."""

    from iGallery.gui.main import main as gui_main

    raise typer.Exit(gui_main(dataset, api_url=_state["api_url"], argv=[]))


if __name__ == "__main__":  # pragma: no cover
    app()
