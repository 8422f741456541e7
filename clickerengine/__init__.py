# clickerengine: clicker game progression engine

from clickerengine.errors import ClickerError, CatalogError, SaveLoadError, SaveConfigError
from clickerengine.cost_scaling import CostScaling
from clickerengine.perk import TargetKind, PerkOperation, PerkTarget, UpgradePerk, Perk
from clickerengine.requirement import Requirement, Req
from clickerengine.currency import CurrencyDef, Clickable
from clickerengine.element import BuildingDef, UpgradeDef, ElementStatus
from clickerengine.save import (
    SaveType,
    SaveConfig,
    ProgressStore,
    KeyValueStore,
    FileStore,
    open_store,
    progress_to_snapshot,
    progress_from_snapshot,
)
from clickerengine.definition import Catalog, GameConfig
from clickerengine.progress import Progress
from clickerengine.perks import PerkResolver
from clickerengine.unlocks import UnlockEvaluator
from clickerengine.events import Notification
from clickerengine.runtime import GameRuntime
from clickerengine.strategy import Strategy, GreedyCheapest
from clickerengine.simulation import Simulation, PlayReport
from clickerengine.formatting import format_text_report, format_catalog

__all__ = [
    # Errors
    "ClickerError",
    "CatalogError",
    "SaveLoadError",
    "SaveConfigError",
    # Cost
    "CostScaling",
    # Perks
    "TargetKind",
    "PerkOperation",
    "PerkTarget",
    "UpgradePerk",
    "Perk",
    # Requirements
    "Requirement",
    "Req",
    # Data model
    "CurrencyDef",
    "Clickable",
    "BuildingDef",
    "UpgradeDef",
    "ElementStatus",
    # Persistence
    "SaveType",
    "SaveConfig",
    "ProgressStore",
    "KeyValueStore",
    "FileStore",
    "open_store",
    "progress_to_snapshot",
    "progress_from_snapshot",
    # Catalog
    "Catalog",
    "GameConfig",
    # Progress
    "Progress",
    # Resolution
    "PerkResolver",
    "UnlockEvaluator",
    # Runtime
    "Notification",
    "GameRuntime",
    # Autoplay
    "Strategy",
    "GreedyCheapest",
    "Simulation",
    "PlayReport",
    # Formatting
    "format_text_report",
    "format_catalog",
]
