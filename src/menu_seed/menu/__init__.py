"""Menu seeding module."""

from menu_seed.menu.models import (
    LinkResult,
    Menu,
    MenuSeed,
    MenuSeedSet,
    RecordResult,
    SeedSummary,
    UpsertOutcome,
    VerificationResult,
)
from menu_seed.menu.repository import MenuRepository
from menu_seed.menu.seed_data import MASTERS_MENUS
from menu_seed.menu.seeder import MenuSeeder

__all__ = [
    'Menu',
    'MenuSeed',
    'MenuSeedSet',
    'UpsertOutcome',
    'RecordResult',
    'LinkResult',
    'VerificationResult',
    'SeedSummary',
    'MASTERS_MENUS',
    'MenuRepository',
    'MenuSeeder',
]
