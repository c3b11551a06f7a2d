"""Developer tools (fixture seeding)."""
