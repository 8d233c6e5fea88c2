"""
Configuration for the candidate matching engine.

Defaults below reproduce the stock scoring and filtering rules.  A
YAML file (see ``config.yaml`` next to this module) can override the
tier weights, the availability vocabulary and the visa exemptions;
the CLI loads it with ``--config``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

import yaml  # type: ignore

logger = logging.getLogger(__name__)

# Notice periods in increasing order of delay.
AVAILABILITY_RANKS: Dict[str, int] = {
    "immediate": 0,
    "1 week": 1,
    "2 weeks": 2,
    "1 month": 3,
    "2 months": 4,
    "3 months": 5,
}

# Visa criteria that every candidate satisfies (compared lower-cased).
VISA_EXEMPTIONS: FrozenSet[str] = frozenset({"work permit"})

PAST_CURRENT_WEIGHT = 3
PREFERRED_WEIGHT = 1


@dataclass(frozen=True)
class ScoringWeights:
    """Points per matched token for each candidate tier."""

    past_current: int = PAST_CURRENT_WEIGHT
    preferred: int = PREFERRED_WEIGHT


@dataclass(frozen=True)
class FilterSettings:
    availability_ranks: Dict[str, int] = field(default_factory=lambda: dict(AVAILABILITY_RANKS))
    visa_exemptions: FrozenSet[str] = VISA_EXEMPTIONS


DEFAULT_WEIGHTS = ScoringWeights()
DEFAULT_FILTER_SETTINGS = FilterSettings()


def load_config(config_path: Optional[str]) -> Dict[str, object]:
    """Load a YAML config file; ``None`` or an empty file gives ``{}``."""
    if not config_path:
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {config_path} must be a mapping, got {type(cfg).__name__}")
    logger.debug("Loaded config from %s: %s", config_path, cfg)
    return cfg


def weights_from_config(cfg: Dict[str, object]) -> ScoringWeights:
    weights = cfg.get("weights") or {}
    return ScoringWeights(
        past_current=int(weights.get("past_current", PAST_CURRENT_WEIGHT)),
        preferred=int(weights.get("preferred", PREFERRED_WEIGHT)),
    )


def filter_settings_from_config(cfg: Dict[str, object]) -> FilterSettings:
    availability = cfg.get("availability")
    exemptions = cfg.get("visa_exemptions")
    return FilterSettings(
        availability_ranks=(
            {str(k).lower(): int(v) for k, v in availability.items()}
            if availability
            else dict(AVAILABILITY_RANKS)
        ),
        visa_exemptions=(
            frozenset(str(v).lower() for v in exemptions) if exemptions is not None else VISA_EXEMPTIONS
        ),
    )
