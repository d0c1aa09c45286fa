from __future__ import annotations

import asyncio
import os

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for widget tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtWidgets import QApplication

from iGallery.gui.qt import dialogs
from iGallery.gui.qt.dialogs import QtConfirmPresenter
from iGallery.gui.qt.gallery_window import GalleryWindow


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def window(qapp, gallery_vm):
    widget = GalleryWindow(gallery_vm)
    yield widget
    widget.deleteLater()


def test_window_reflects_loaded_dataset(window, gallery_vm):
    asyncio.run(gallery_vm.mount("cats"))

    assert window.title_label.text() == "Dataset: cats"
    assert window.windowTitle() == "iGallery - cats"
    assert not window.list_view.isHidden()
    assert window.delete_button.isHidden()
    assert window.select_all_button.text() == "Select All"


def test_window_selection_controls(window, gallery_vm):
    asyncio.run(gallery_vm.mount("cats"))

    window.select_all_button.click()

    assert window.delete_button.text() == "Delete Selected (2)"
    assert not window.delete_button.isHidden()
    assert window.select_all_button.text() == "Deselect All"


def test_window_shows_error_and_hides_list(window, gallery_vm, fake_api):
    fake_api.failing_lists.add("cats")

    asyncio.run(gallery_vm.mount("cats"))

    assert window.status_label.text() == "Error fetching images"
    assert window.list_view.isHidden()


def test_window_empty_dataset_message(window, gallery_vm, fake_api):
    fake_api.datasets["empty"] = []

    asyncio.run(gallery_vm.mount("empty"))

    assert window.status_label.text() == "No images found"


def test_presenter_declined_rejects(qapp, gallery_vm, commands, fake_api, monkeypatch):
    prompts = []

    def fake_confirm(parent, message, **kwargs):
        prompts.append((message, kwargs))
        return False

    monkeypatch.setattr(dialogs, "confirm_action", fake_confirm)
    QtConfirmPresenter(commands)
    asyncio.run(gallery_vm.mount("cats"))
    gallery_vm.toggle("a.png", True)

    gallery_vm.request_delete_selected()

    [(message, kwargs)] = prompts
    assert message.startswith("Are you sure you want to delete 1 selected images?")
    assert kwargs["yes_label"] == "Delete"
    assert kwargs["kind"] == "warning"
    assert fake_api.delete_calls == []


def test_presenter_approved_runs_delete(qapp, gallery_vm, commands, fake_api, monkeypatch):
    monkeypatch.setattr(dialogs, "confirm_action", lambda *args, **kwargs: True)
    presenter = QtConfirmPresenter(commands)

    async def scenario():
        await gallery_vm.mount("cats")
        gallery_vm.toggle("a.png", True)
        gallery_vm.request_delete_selected()
        await asyncio.gather(*presenter._tasks)

    asyncio.run(scenario())

    assert fake_api.delete_calls == ["a.png"]
    assert gallery_vm.images.value.paths == ("b.png",)


def test_add_images_hidden_without_upload_presenter(window, gallery_vm):
    asyncio.run(gallery_vm.mount("cats"))

    assert window.add_images_button.isHidden()


def test_add_images_opens_upload_dialog(qapp, gallery_vm, presenter, fake_api):
    window = GalleryWindow(gallery_vm)
    asyncio.run(gallery_vm.mount("cats"))

    assert not window.add_images_button.isHidden()
    window.add_images_button.click()

    [request] = presenter.uploads
    assert request.dataset_name == "cats"
    fake_api.datasets["cats"].append("c.png")
    asyncio.run(request.on_uploaded())
    assert gallery_vm.images.value.paths == ("a.png", "b.png", "c.png")
    window.deleteLater()
