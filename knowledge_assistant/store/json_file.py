"""JSON file-backed knowledge item store."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from knowledge_assistant.models import KnowledgeItem
from knowledge_assistant.store.base import StoreRegistry
from knowledge_assistant.store.memory import InMemoryItemStore

logger = logging.getLogger(__name__)


@StoreRegistry.register("json")
class JsonFileItemStore(InMemoryItemStore):
    """Knowledge store persisted as a JSON list of item objects.

    The file is read once at construction and replaced after every
    mutation.  A missing file starts an empty store, as does a file that
    is not valid JSON or does not hold a list (with a warning).

    Writes go to a temporary file beside the target which is then renamed
    over it, so the file is never left half written.  A mutation whose
    write fails raises ``OSError`` and leaves the store unchanged.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        super().__init__(self._load())

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> list[KnowledgeItem]:
        if not self._path.is_file():
            logger.debug("Knowledge file does not exist yet: %s", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Knowledge file %s is not valid JSON (%s); starting empty", self._path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Knowledge file %s does not contain a list; starting empty", self._path)
            return []

        items: list[KnowledgeItem] = []
        for entry in data:
            try:
                items.append(KnowledgeItem.from_dict(entry))
            except (KeyError, TypeError, AttributeError):
                logger.warning("Skipping malformed knowledge entry in %s: %r", self._path, entry)
        logger.debug("Loaded %d knowledge items from %s", len(items), self._path)
        return items

    def _save(self, items: list[KnowledgeItem]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([item.to_dict() for item in items], indent=2) + "\n"

        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d knowledge items to %s", len(items), self._path)
