"""
Scaler configuration entities.

ScalerConfig is the raw input handed over by the host; ResolvedMetadata is
the validated, typed view built from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _as_str_map(values: Mapping[str, Any] | None) -> dict[str, str]:
    if not values:
        return {}
    return {str(k): "" if v is None else _stringify(v) for k, v in values.items()}


def _stringify(value: Any) -> str:
    # YAML gives us real booleans; keep the lowercase spelling of the raw form
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class ScalerConfig:
    """Raw trigger configuration supplied once at scaler construction."""

    trigger_metadata: dict[str, str] = field(default_factory=dict)
    auth_params: dict[str, str] = field(default_factory=dict)
    resolved_env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScalerConfig":
        """Build a config from a mapping using the host's camelCase keys."""
        return cls(
            trigger_metadata=_as_str_map(data.get("triggerMetadata")),
            auth_params=_as_str_map(data.get("authParams")),
            resolved_env=_as_str_map(data.get("resolvedEnv")),
        )


@dataclass(frozen=True)
class ResolvedMetadata:
    """Validated scaler settings, immutable for the scaler's lifetime."""

    addresses: tuple[str, ...]
    indexes: tuple[str, ...]
    search_template_name: str
    value_location: str
    target_value: int
    parameters: tuple[str, ...] = ()
    unsafe_ssl: bool = False
    username: str | None = None
    password: str | None = field(default=None, repr=False)


__all__ = [
    "ResolvedMetadata",
    "ScalerConfig",
]
