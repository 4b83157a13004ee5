from __future__ import annotations

import logging
from importlib import metadata
from typing import Dict, Iterable

from dungeon.algorithms.aldous_broder import AldousBroder
from dungeon.algorithms.base import GenerationAlgorithm
from dungeon.algorithms.binary_tree import BinaryTree
from dungeon.algorithms.recursive_backtracker import RecursiveBacktracker
from dungeon.algorithms.recursive_division import RecursiveDivision

logger = logging.getLogger(__name__)

_PLUGIN_GROUP = "vanilla_dungeon.generation_algorithms"
_plugin_loaded = False
_registry: Dict[str, GenerationAlgorithm] = {}


def register_algorithm(algorithm: GenerationAlgorithm) -> None:
    """Register a generation strategy provided by external content."""

    _registry[algorithm.name] = algorithm


def register_algorithms(algorithms: Iterable[GenerationAlgorithm]) -> None:
    for algorithm in algorithms:
        register_algorithm(algorithm)


def _load_entry_point_algorithms() -> None:
    global _plugin_loaded
    if _plugin_loaded:
        return
    _plugin_loaded = True
    for entry_point in metadata.entry_points().select(group=_PLUGIN_GROUP):
        try:
            loaded = entry_point.load()
        except (ImportError, AttributeError) as exc:
            logger.warning("Skipping generation algorithm plugin %s: %s", entry_point.name, exc)
            continue
        _register_from_object(loaded)


def _register_from_object(obj) -> None:
    if obj is None:
        return
    if hasattr(obj, "generate") and hasattr(obj, "name"):
        if isinstance(obj, type):
            obj = obj()
        register_algorithm(obj)
        return
    if callable(obj):
        _register_from_object(obj())
        return
    if isinstance(obj, (list, tuple, set, frozenset)):
        for item in obj:
            _register_from_object(item)


def _builtin_algorithms() -> Dict[str, GenerationAlgorithm]:
    return {
        BinaryTree.name: BinaryTree(),
        AldousBroder.name: AldousBroder(),
        RecursiveBacktracker.name: RecursiveBacktracker(),
        RecursiveDivision.name: RecursiveDivision(),
    }


def create_algorithm_registry(overrides: Dict[str, GenerationAlgorithm] | None = None) -> Dict[str, GenerationAlgorithm]:
    """Combine built-in, plugin and override strategies into a single map."""

    _load_entry_point_algorithms()
    combined: Dict[str, GenerationAlgorithm] = _builtin_algorithms()
    combined.update(_registry)
    if overrides:
        combined.update(overrides)
    return combined


def get_algorithm(name: str) -> GenerationAlgorithm:
    registry = create_algorithm_registry()
    try:
        return registry[name]
    except KeyError as exc:
        raise ValueError(f"Unknown generation algorithm '{name}'") from exc


def available_algorithm_names() -> list[str]:
    return sorted(create_algorithm_registry())


__all__ = [
    "available_algorithm_names",
    "create_algorithm_registry",
    "get_algorithm",
    "register_algorithm",
    "register_algorithms",
]
