#!/usr/bin/env python3
"""
Feature flag utilities and decorators.

Each naming engine can be switched off from the environment
(ENABLE_<ENGINE>=false). Engines are referred to by short name:
"shadbala" maps to ENABLE_SHADBALA.

- get_feature_flags() -> cached FeatureFlagState
- is_feature_enabled(name) -> lets the pipeline skip a disabled panel
- require_feature(name) -> decorator gating an engine or an endpoint
"""

from __future__ import annotations

import inspect
import os
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from functools import wraps
from typing import Any

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in _TRUTHY


def _flag(name: str, default: bool = True) -> Any:
    return field(default_factory=lambda: _env_bool(name, default))


@dataclass
class FeatureFlagState:
    ENABLE_ISTA_DEVATA: bool = _flag("ENABLE_ISTA_DEVATA")
    ENABLE_SHADBALA: bool = _flag("ENABLE_SHADBALA")
    ENABLE_HODA_CHAKRA: bool = _flag("ENABLE_HODA_CHAKRA")
    ENABLE_SPECIAL_LAGNAS: bool = _flag("ENABLE_SPECIAL_LAGNAS")
    ENABLE_SVARA: bool = _flag("ENABLE_SVARA")
    ENABLE_KATAPAYADI: bool = _flag("ENABLE_KATAPAYADI")

    def enabled_features(self) -> list[str]:
        """Names of the flags that are on, in declaration order."""
        return [name for name, value in self.to_dict().items() if value is True]

    def to_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_FLAGS: FeatureFlagState | None = None


def get_feature_flags() -> FeatureFlagState:
    global _FLAGS
    if _FLAGS is None:
        _FLAGS = FeatureFlagState()
    return _FLAGS


def reset_feature_flags() -> None:
    """Drop the cached state so the environment is read again."""
    global _FLAGS
    _FLAGS = None


# "hoda_chakra" -> "ENABLE_HODA_CHAKRA"
_STRING_FLAG_MAP: dict[str, str] = {
    f.name.removeprefix("ENABLE_").lower(): f.name for f in fields(FeatureFlagState)
}


def is_feature_enabled(flag: str) -> bool:
    attr = _STRING_FLAG_MAP.get(flag)
    if attr is None:
        # Unknown engine names are treated as off
        return False
    return getattr(get_feature_flags(), attr) is True


def require_feature(flag: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to gate a function or endpoint by feature flag.

    Coroutines (FastAPI endpoints) raise HTTPException 403 when the
    flag is off; plain functions raise RuntimeError("Feature disabled").
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                if not is_feature_enabled(flag):
                    from fastapi import HTTPException

                    raise HTTPException(status_code=403, detail="Feature disabled")
                return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            if not is_feature_enabled(flag):
                raise RuntimeError("Feature disabled")
            return func(*args, **kwargs)

        return sync_wrapper

    return decorator
