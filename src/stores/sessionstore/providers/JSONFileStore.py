from ..SessionStoreInterface import SessionStoreInterface
from typing import Any, Optional
import json
import os
import logging

class JSONFileStore(SessionStoreInterface):
    """
    All keys live in one JSON document on disk. Every save rewrites the
    whole document; concurrent writers are not coordinated (last write wins).
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.logger = logging.getLogger(__name__)

    def _read_document(self) -> dict:
        if not os.path.exists(self.file_path):
            return {}

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Ignoring unreadable session store {self.file_path}: {e}")
            return {}

        if not isinstance(document, dict):
            self.logger.warning(f"Ignoring session store {self.file_path}: top level is not an object")
            return {}

        return document

    def _write_document(self, document: dict):
        directory = os.path.dirname(os.path.abspath(self.file_path))
        os.makedirs(directory, exist_ok=True)

        tmp_path = f"{self.file_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.file_path)

    def load(self, key: str) -> Optional[Any]:
        return self._read_document().get(key)

    def save(self, key: str, value: Any):
        document = self._read_document()
        document[key] = value
        self._write_document(document)

    def delete(self, key: str):
        document = self._read_document()
        if key in document:
            del document[key]
            self._write_document(document)
