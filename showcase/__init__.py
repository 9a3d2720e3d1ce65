"""Vision Showcase: signed-URL image upload with asynchronous analysis polling."""

__version__ = "0.1.0"
