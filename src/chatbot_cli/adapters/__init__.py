"""Storage adapters for ChatBot CLI."""

from .file_store import FileStore

__all__ = ["FileStore"]
