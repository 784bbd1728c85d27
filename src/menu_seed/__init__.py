"""
Menu Seed Package

Seeds the hierarchical masters navigation menu into DuckDB.
"""

from menu_seed.config import Config, load_config
from menu_seed.log import setup_logger
from menu_seed.main import main, seed_menus

__all__ = ['Config', 'load_config', 'setup_logger', 'main', 'seed_menus']
