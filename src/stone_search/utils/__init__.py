"""
Utilities - configuration and factories.
"""

from stone_search.utils.config import Config, DEFAULT_CONFIG, DEFAULT_DEPTH, DEFAULT_SIZE
from stone_search.utils.factory import create_game, create_game_from_config, create_search

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "DEFAULT_DEPTH",
    "DEFAULT_SIZE",
    "create_game",
    "create_game_from_config",
    "create_search",
]
