"""File savers with distinct post-conditions.

A local saver always returns a filesystem path and a cloud saver always
returns a URL. They implement separate ports so a caller expecting a path
can never be handed a URL. Both are simulated: content is kept in memory
and nothing is written to disk or sent over the network.
"""
import hashlib
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from orderflow.infrastructure.logging.logger import get_logger


class LocalFileSaverPort(ABC):

    @abstractmethod
    def save_file_local(self, content: str) -> str:
        """Save content and return the local filesystem path."""


class CloudFileSaverPort(ABC):

    @abstractmethod
    def save_file_cloud(self, content: str) -> str:
        """Upload content and return its URL."""


def _content_name(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:16] + ".txt"


class LocalFileSaver(LocalFileSaverPort):
    """Simulated local disk keyed by the path it would have written."""

    def __init__(self, base_dir: Optional[str] = None):
        self._base_dir = Path(base_dir or tempfile.gettempdir())
        self._files: Dict[str, str] = {}
        self._logger = get_logger(__name__)

    def save_file_local(self, content: str) -> str:
        print(f"Saving file locally: {content}")
        path = os.fspath(self._base_dir / _content_name(content))
        self._files[path] = content
        self._logger.debug("Saved file locally", path=path)
        return path

    def get(self, path: str) -> Optional[str]:
        return self._files.get(path)


class CloudFileSaver(CloudFileSaverPort):
    """Simulated object storage; nothing leaves the process."""

    def __init__(self, base_url: str = "https://cloud.example.com/files"):
        self._base_url = base_url.rstrip("/")
        self._objects: Dict[str, str] = {}
        self._logger = get_logger(__name__)

    def save_file_cloud(self, content: str) -> str:
        print(f"Saving file to cloud: {content}")
        url = f"{self._base_url}/{_content_name(content)}"
        self._objects[url] = content
        self._logger.debug("Uploaded file", url=url)
        return url

    def get(self, url: str) -> Optional[str]:
        return self._objects.get(url)
