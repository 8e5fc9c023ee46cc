"""Persistence layer: schema, sessions and repository functions."""
