"""Configuration module for the menu seeder."""

from menu_seed.config.config import Config, load_config

__all__ = ['Config', 'load_config']
