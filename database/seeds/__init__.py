"""
Yummy Catalog - Seed scripts.

Architecture:
- data/: Seed data definitions (TypedDict shapes + bundled dataset)
- seeders/: Reusable seeding logic (reset, images, categories, menu)

Run the seed:
    python -m database.seeds.run_all_seeds

Validate the stored catalog:
    python -m database.seeds.validate_seed

Seeding from another dataset:
    SEED_DATA_FILE=path/to/menu.json python -m database.seeds.run_all_seeds
"""

from database.seeds.run_all_seeds import seed
from database.seeds.validate_seed import ValidationReport, validate_seed

__all__ = [
    "seed",
    "validate_seed",
    "ValidationReport",
]
