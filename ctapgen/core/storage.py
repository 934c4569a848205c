"""Persistence of the basic settings between sessions."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ctapgen.core.config import BasicInfo

logger = logging.getLogger(__name__)

STORAGE_KEY = "basicInfoInput"


class BasicInfoStore:
    """Stores the last edited BasicInfo as JSON under a fixed key.

    Only the basic settings are persisted; the pipeline tree lives for a
    single session.
    """

    def __init__(self, storage_path: Optional[Path] = None):
        """Initialize the store.

        Args:
            storage_path: Path to storage.json (default: ~/.ctapgen/storage.json)
        """
        if storage_path is None:
            storage_path = Path.home() / ".ctapgen" / "storage.json"

        self.storage_path = Path(storage_path)

    def _read(self) -> dict:
        if not self.storage_path.exists():
            return {}
        try:
            with open(self.storage_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.storage_path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> BasicInfo:
        """Load the stored settings, falling back to defaults."""
        raw = self._read().get(STORAGE_KEY)
        if raw is None:
            return BasicInfo()

        try:
            return BasicInfo.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding stored basic settings: %s", e)
            return BasicInfo()

    def save(self, basic: BasicInfo) -> None:
        """Overwrite the stored settings with ``basic``."""
        data = self._read()
        data[STORAGE_KEY] = basic.model_dump_json()

        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.storage_path, "w") as f:
            json.dump(data, f, indent=2)
        logger.debug("Saved basic settings to %s", self.storage_path)

    def clear(self) -> None:
        """Forget the stored settings."""
        data = self._read()
        if data.pop(STORAGE_KEY, None) is None:
            return
        with open(self.storage_path, "w") as f:
            json.dump(data, f, indent=2)
