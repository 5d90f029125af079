"""User settings: defaults, schema and persistence."""
