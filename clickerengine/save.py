"""Progress save/load: snapshot codec and the stores it is written to."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Any

from clickerengine.errors import SaveConfigError, SaveLoadError
from clickerengine.progress import Progress

if TYPE_CHECKING:
    from clickerengine.definition import Catalog

log = logging.getLogger(__name__)


class SaveType(Enum):
    KEY_VALUE = auto()
    FILE = auto()


@dataclass
class SaveConfig:
    """Where progress is persisted."""

    save_type: SaveType = SaveType.FILE
    save_name: str = "clicker_save"
    directory: str = "."

    @property
    def full_save_path(self) -> Path:
        return Path(self.directory).expanduser() / f"{self.save_name}.json"


# ── Snapshot codec ───────────────────────────────────────────────────


def progress_to_snapshot(progress: Progress) -> dict[str, Any]:
    """Serialise progress to a JSON-compatible dict of catalog ids."""
    return {
        "total_amount": progress.total_amount,
        "earned_buildings": [
            {"id": bid, "count": count} for bid, count in progress.buildings.items()
        ],
        "earned_upgrades": list(progress.upgrades),
    }


def progress_from_snapshot(catalog: Catalog, snapshot: dict[str, Any]) -> Progress:
    """Resolve a snapshot against *catalog*.

    Raises SaveLoadError on any id the catalog does not know, or on a
    malformed record. Nothing is partially built.
    """
    if not isinstance(snapshot, dict):
        raise SaveLoadError(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

    try:
        total = float(snapshot["total_amount"])
        raw_buildings = snapshot.get("earned_buildings", [])
        raw_upgrades = snapshot.get("earned_upgrades", [])
    except (KeyError, TypeError, ValueError) as exc:
        raise SaveLoadError(f"Malformed snapshot: {exc}") from exc
    if not isinstance(raw_buildings, list) or not isinstance(raw_upgrades, list):
        raise SaveLoadError("earned_buildings and earned_upgrades must be lists")

    buildings: dict[str, int] = {}
    for entry in raw_buildings:
        try:
            bid = entry["id"]
            count = int(entry["count"])
        except (KeyError, TypeError, ValueError) as exc:
            raise SaveLoadError(f"Malformed building entry {entry!r}") from exc
        if not isinstance(bid, str) or catalog.get_building(bid) is None:
            raise SaveLoadError(f"Unknown building in save: {bid!r}")
        if bid in buildings:
            raise SaveLoadError(f"Building listed twice in save: {bid!r}")
        if count < 1:
            raise SaveLoadError(f"Building {bid!r} has invalid count {count}")
        buildings[bid] = count

    upgrades: list[str] = []
    for uid in raw_upgrades:
        if not isinstance(uid, str) or catalog.get_upgrade(uid) is None:
            raise SaveLoadError(f"Unknown upgrade in save: {uid!r}")
        if uid in upgrades:
            raise SaveLoadError(f"Upgrade listed twice in save: {uid!r}")
        upgrades.append(uid)

    return Progress(total_amount=total, buildings=buildings, upgrades=upgrades)


def dumps(snapshot: dict[str, Any]) -> str:
    return json.dumps(snapshot, indent=2)


def loads(text: str) -> dict[str, Any]:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SaveLoadError(f"Save is not valid JSON: {exc}") from exc


# ── Stores ───────────────────────────────────────────────────────────


class ProgressStore(ABC):
    """A blocking text store for one save slot."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the saved text, or None if nothing has been saved."""

    @abstractmethod
    def write(self, text: str) -> None: ...


class KeyValueStore(ProgressStore):
    """Save slot stored under one key of a mutable mapping."""

    def __init__(self, mapping: MutableMapping[str, str], key: str) -> None:
        self.mapping = mapping
        self.key = key

    def read(self) -> str | None:
        return self.mapping.get(self.key)

    def write(self, text: str) -> None:
        self.mapping[self.key] = text


class FileStore(ProgressStore):
    """Save slot stored as a JSON file on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> str | None:
        if not self.path.exists():
            return None
        with self.path.open("r", encoding="utf-8") as handle:
            return handle.read()

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(text)


def open_store(
    config: SaveConfig, mapping: MutableMapping[str, str] | None = None
) -> ProgressStore:
    """Build the store named by *config*.

    Raises SaveConfigError for a save type with no store implementation.
    """
    if config.save_type is SaveType.FILE:
        return FileStore(config.full_save_path)
    if config.save_type is SaveType.KEY_VALUE:
        return KeyValueStore(mapping if mapping is not None else {}, config.save_name)
    raise SaveConfigError(f"Unsupported save type: {config.save_type!r}")
