"""GUI view layer.

Exports:
 - ExampleGalleryView
"""

from .example_gallery_view import ExampleGalleryView  # noqa: F401
