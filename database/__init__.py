"""Disease catalog persistence: schema, seed data and record service."""
