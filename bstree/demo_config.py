"""Configuration for the ``bst_demo`` demonstration run."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

__all__ = ["DemoConfig", "load_demo_config"]


@dataclass(frozen=True)
class DemoConfig:
    """Sampling parameters for the demonstration driver.

    ``initial_*`` describes the values the tree is constructed from and
    ``insert_*`` the values inserted afterwards one at a time.  Ranges are
    half-open: ``[min, max)``.
    """

    initial_count: int = 20
    initial_min: int = 0
    initial_max: int = 100
    insert_count: int = 20
    insert_min: int = 100
    insert_max: int = 1000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "seed" and value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{item.name} must be an integer")
        for prefix in ("initial", "insert"):
            if getattr(self, f"{prefix}_count") < 0:
                raise ValueError(f"{prefix}_count must be non-negative")
            if getattr(self, f"{prefix}_max") <= getattr(self, f"{prefix}_min"):
                raise ValueError(f"{prefix}_max must be greater than {prefix}_min")

    def with_seed(self, seed: Optional[int]) -> "DemoConfig":
        """Return a copy using *seed* when one is given."""

        if seed is None:
            return self
        return replace(self, seed=seed)


def _parse_mapping(payload: Any, source: Path) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValueError(f"Demo config {source} must contain a mapping")
    known = {item.name for item in fields(DemoConfig)}
    unknown = sorted(str(key) for key in payload if key not in known)
    if unknown:
        raise ValueError(f"Unknown demo config keys: {', '.join(unknown)}")
    return payload


def load_demo_config(path: Union[str, Path, None]) -> DemoConfig:
    """Load a :class:`DemoConfig` from a YAML or JSON file.

    ``None`` yields the defaults.  Keys that are omitted fall back to their
    default values.
    """

    if path is None:
        return DemoConfig()

    source = Path(path)
    try:
        payload = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Demo config {source} is not valid YAML or JSON") from exc

    return DemoConfig(**_parse_mapping(payload, source))
