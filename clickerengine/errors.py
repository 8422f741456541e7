from __future__ import annotations


class ClickerError(Exception):
    """Base class for engine errors surfaced to callers."""


class CatalogError(ClickerError, ValueError):
    """The catalog failed validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            "Invalid Catalog:\n" + "\n".join(f"  - {e}" for e in self.errors)
        )


class SaveLoadError(ClickerError, ValueError):
    """A snapshot could not be resolved against the live catalog."""


class SaveConfigError(ClickerError):
    """The save configuration names a target kind the engine cannot open."""
