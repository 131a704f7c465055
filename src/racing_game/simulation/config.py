"""Race configuration schema using msgspec."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import msgspec


class RaceConfig(msgspec.Struct, frozen=True):
    """
    Immutable representation of a single race setup.
    Names and trial count are kept raw; validation happens in the engine.
    """

    names: tuple[str, ...]
    trial_count: int
    seed: int | None = None

    @property
    def encoded(self) -> str:
        """Shareable config string (Base64)."""
        data: dict[str, object] = {
            "names": list(self.names),
            "trial_count": self.trial_count,
        }
        if self.seed is not None:
            data["seed"] = self.seed

        canonical = json.dumps(data, sort_keys=True, separators=(",", ":"))
        return base64.urlsafe_b64encode(canonical.encode("utf-8")).decode("ascii")

    @classmethod
    def from_encoded(cls, encoded: str) -> RaceConfig:
        """Decode from shareable string."""
        json_str = base64.urlsafe_b64decode(encoded).decode("utf-8")
        return msgspec.json.decode(json_str, type=cls)

    @property
    def repr(self) -> str:
        """String representation for logging."""
        seed = "random" if self.seed is None else self.seed
        return (
            f"{', '.join(self.names)} for {self.trial_count} rounds "
            f"(Seed: {seed}) - {self.encoded}"
        )


class PartialRaceConfig(msgspec.Struct):
    """
    Partial configuration for loading from TOML files.
    """

    names: list[str] | None = None
    trial_count: int | None = None
    seed: int | None = None

    @classmethod
    def from_toml(cls, path: str | Path) -> PartialRaceConfig:
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)
