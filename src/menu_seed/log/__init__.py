"""Logging module for the menu seeder."""

from menu_seed.log.logger import cleanup_logger, setup_logger, setup_seed_logger

__all__ = [
    'setup_logger',
    'cleanup_logger',
    'setup_seed_logger',
]
