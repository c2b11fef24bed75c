"""Process-wide defaults for the endpoint intersector."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class IntersectorConfig:
    # Reject coordinates whose component count differs from the first point.
    check_dimensions: bool = True


_INTERSECTOR_CONFIG = IntersectorConfig()


def get_intersector_config() -> IntersectorConfig:
    return copy.deepcopy(_INTERSECTOR_CONFIG)


def set_intersector_config(config: IntersectorConfig) -> None:
    global _INTERSECTOR_CONFIG
    _INTERSECTOR_CONFIG = copy.deepcopy(config)


__all__ = ["IntersectorConfig", "get_intersector_config", "set_intersector_config"]
