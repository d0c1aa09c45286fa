import asyncio
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make ``iGallery`` importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from iGallery.application.interfaces import IGalleryApi
from iGallery.application.use_cases.delete_images import DeleteImagesUseCase
from iGallery.application.use_cases.list_images import ListImagesUseCase
from iGallery.errors import NetworkError
from iGallery.events.bus import EventBus
from iGallery.gui.services.ui_commands import UiCommandChannel
from iGallery.gui.viewmodels.gallery_viewmodel import GalleryViewModel


class FakeGalleryApi(IGalleryApi):
    """In-memory dataset server.

    ``gates`` holds an ``asyncio.Event`` per dataset name; a list call for
    that dataset waits on it, which lets tests keep a fetch in flight.
    """

    def __init__(self, datasets: Optional[Dict[str, Iterable[str]]] = None):
        self.datasets: Dict[str, List[str]] = {
            name: list(paths) for name, paths in (datasets or {}).items()
        }
        self.failing_lists: set[str] = set()
        self.failing_deletes: set[str] = set()
        self.gates: Dict[str, asyncio.Event] = {}
        self.list_calls: List[str] = []
        self.delete_calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def list_images(self, dataset_name: str):
        self.list_calls.append(dataset_name)
        gate = self.gates.get(dataset_name)
        if gate is not None:
            await gate.wait()
        if dataset_name in self.failing_lists:
            raise NetworkError("listImages failed", endpoint="/api/datasets/listImages", status_code=500)
        return [{"img_path": path} for path in self.datasets.get(dataset_name, [])]

    async def delete_image(self, img_path: str) -> None:
        self.delete_calls.append(img_path)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if img_path in self.failing_deletes:
                raise NetworkError("delete failed", endpoint="/api/img/delete", status_code=500)
            for paths in self.datasets.values():
                if img_path in paths:
                    paths.remove(img_path)
        finally:
            self.in_flight -= 1


class RecordingPresenter:
    """Collects UI commands instead of showing dialogs."""

    def __init__(self, commands: UiCommandChannel):
        self.confirmations = []
        self.uploads = []
        commands.confirm_requested.connect(self.confirmations.append)
        commands.upload_requested.connect(self.uploads.append)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def fake_api():
    return FakeGalleryApi({"cats": ["b.png", "a.png"], "dogs": ["rex.png"]})


@pytest.fixture
def commands():
    return UiCommandChannel()


@pytest.fixture
def presenter(commands):
    return RecordingPresenter(commands)


@pytest.fixture
def gallery_vm(fake_api, event_bus, commands):
    vm = GalleryViewModel(
        list_images=ListImagesUseCase(fake_api, event_bus),
        delete_images=DeleteImagesUseCase(fake_api, event_bus),
        event_bus=event_bus,
        commands=commands,
    )
    yield vm
    vm.dispose()
