"""
Task graph submodule: storage, validation and root binding.
"""

from .store import GraphStore, KEEP
from .binding import bind_root
from .validate import find_loop, validate_node

__all__ = [
    'GraphStore',
    'KEEP',
    'bind_root',
    'find_loop',
    'validate_node'
]
