"""Dungeon level topology: grid graph, maze generation and distance queries."""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
