"""Core contracts, types, seeding, config and logging for the generators."""
