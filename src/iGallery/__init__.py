"""iGallery: browse, select and bulk-delete images of a remote dataset."""

__version__ = "0.1.0"
