"""File storage."""

from .file_savers import CloudFileSaver, CloudFileSaverPort, LocalFileSaver, LocalFileSaverPort

__all__ = ["LocalFileSaverPort", "CloudFileSaverPort", "LocalFileSaver", "CloudFileSaver"]
