from dungeon.algorithms.aldous_broder import AldousBroder
from dungeon.algorithms.base import GenerationAlgorithm, make_rng
from dungeon.algorithms.binary_tree import BinaryTree
from dungeon.algorithms.longest_path import LongestPath, LongestPathResult
from dungeon.algorithms.path_guarantor import ensure_path
from dungeon.algorithms.recursive_backtracker import RecursiveBacktracker
from dungeon.algorithms.recursive_division import RecursiveDivision
from dungeon.algorithms.registry import (
    available_algorithm_names,
    create_algorithm_registry,
    get_algorithm,
    register_algorithm,
    register_algorithms,
)
from dungeon.algorithms.shortest_path import path_exists, shortest_path

__all__ = [
    "AldousBroder",
    "BinaryTree",
    "GenerationAlgorithm",
    "LongestPath",
    "LongestPathResult",
    "RecursiveBacktracker",
    "RecursiveDivision",
    "available_algorithm_names",
    "create_algorithm_registry",
    "ensure_path",
    "get_algorithm",
    "make_rng",
    "path_exists",
    "register_algorithm",
    "register_algorithms",
    "shortest_path",
]
