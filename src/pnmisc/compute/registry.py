"""Registry of named transform functions for the apply statistics.

Users can register custom transforms via the decorator::

    from pnmisc.compute.registry import register_apply_function

    @register_apply_function("my_transform")
    def my_transform(values: np.ndarray, **kwargs) -> np.ndarray:
        # same length as values, or shorter (padded with NaN)
        ...
        return out
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)


class ApplyFunction(Protocol):
    """Protocol for transforms applied to an ``x`` or ``y`` column.

    A valid transform accepts the column as its first positional argument
    and returns a vector of the same length or shorter.
    """

    def __call__(self, values: np.ndarray, **kwargs: object) -> np.ndarray: ...


class ApplyFunctionRegistry:
    """Registry of named transforms.

    Built-in transforms are registered when ``pnmisc.compute`` is imported.
    Users can add their own via :func:`register_apply_function`.
    """

    _registry: dict[str, ApplyFunction] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ApplyFunction], ApplyFunction]:
        """Decorator that registers a transform under *name*."""

        def decorator(func: ApplyFunction) -> ApplyFunction:
            if name in cls._registry:
                logger.warning("Overwriting existing apply function: %s", name)
            cls._registry[name] = func
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> ApplyFunction:
        """Retrieve a transform by name (raises ``KeyError`` if missing)."""
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise KeyError(f"Unknown apply function: {name!r}. Available: {available}")
        return cls._registry[name]

    @classmethod
    def list_functions(cls) -> list[str]:
        """Return sorted list of registered transform names."""
        return sorted(cls._registry.keys())

    @classmethod
    def resolve(cls, fun: str | Callable | None) -> Callable | None:
        """Return *fun* itself when callable, or the transform registered under it."""
        if fun is None or callable(fun):
            return fun
        if isinstance(fun, str):
            return cls.get(fun)
        raise TypeError(f"Expected a callable or a function name, got {type(fun).__name__}")


# Convenience alias for end-user registration.
register_apply_function = ApplyFunctionRegistry.register
