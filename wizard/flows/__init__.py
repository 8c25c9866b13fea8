"""Concrete wizard flows built on the shared navigation engine."""

from .creation import create_character_wizard
from .level_up import LevelUpNavigator, create_level_up_wizard

__all__ = ["LevelUpNavigator", "create_character_wizard", "create_level_up_wizard"]
