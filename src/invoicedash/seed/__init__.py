"""Backend seeding for invoicedash."""

from invoicedash.seed.seeder import Seeder, hash_password, seed_database

__all__ = ["Seeder", "hash_password", "seed_database"]
