"""Tests for the ImageList value object."""

from iGallery.domain.models import (
    BatchDeleteResult,
    DeleteOutcome,
    GallerySnapshot,
    GalleryStatus,
    ImageEntry,
    ImageList,
)


class TestImageList:
    def test_from_paths_sorts_ascending(self):
        images = ImageList.from_paths(["b.png", "a.png", "c.png"])

        assert images.paths == ("a.png", "b.png", "c.png")

    def test_ordinal_case_sensitive_order(self):
        images = ImageList.from_paths(["b.png", "B.png", "a.png", "A.png"])

        # Upper case code points sort before lower case ones.
        assert images.paths == ("A.png", "B.png", "a.png", "b.png")

    def test_duplicates_collapsed(self):
        images = ImageList.from_paths(["a.png", "b.png", "a.png"])

        assert images.paths == ("a.png", "b.png")
        assert len(images) == 2

    def test_contains_accepts_path_or_entry(self):
        images = ImageList.from_paths(["a.png"])

        assert "a.png" in images
        assert ImageEntry("a.png") in images
        assert "b.png" not in images

    def test_membership_uses_path_index(self):
        images = ImageList.from_paths(f"img_{index:05d}.png" for index in range(5000))

        assert images._path_set == frozenset(images.paths)
        assert "img_04999.png" in images
        assert ["img_00000.png"] not in images
        assert None not in images
        assert "_path_set" not in repr(ImageList.from_paths(["a.png"]))

    def test_equality_by_content(self):
        assert ImageList.from_paths(["b", "a"]) == ImageList.from_paths(["a", "b"])

    def test_empty(self):
        images = ImageList()

        assert len(images) == 0
        assert not images
        assert images.paths == ()

    def test_indexing_and_iteration(self):
        images = ImageList.from_paths(["z", "y"])

        assert images[0] == ImageEntry("y")
        assert [e.path for e in images] == ["y", "z"]


class TestBatchDeleteResult:
    def test_all_succeeded(self):
        result = BatchDeleteResult(outcomes=(
            DeleteOutcome("a.png", True),
            DeleteOutcome("b.png", True),
        ))

        assert result.succeeded
        assert result.requested == 2
        assert result.deleted_paths == ("a.png", "b.png")
        assert result.failed_paths == ()

    def test_one_failure_fails_the_batch(self):
        result = BatchDeleteResult(outcomes=(
            DeleteOutcome("a.png", False, "HTTP 500"),
            DeleteOutcome("b.png", True),
        ))

        assert not result.succeeded
        assert result.failed_paths == ("a.png",)
        assert result.deleted_paths == ("b.png",)

    def test_empty_batch_is_successful(self):
        assert BatchDeleteResult().succeeded


def test_snapshot_all_selected():
    images = ImageList.from_paths(["a", "b"])
    snap = GallerySnapshot("cats", GalleryStatus.SUCCESS, images, selected=("a", "b"))

    assert snap.all_selected
    assert not GallerySnapshot("cats", GalleryStatus.SUCCESS, ImageList()).all_selected
