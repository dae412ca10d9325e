"""A lazily expanded file tree with sorting, click callbacks and file and text helpers."""

__version__ = "1.0.0"