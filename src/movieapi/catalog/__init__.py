"""Catalog operations and view mapping.

Operations return Outcome values; the api layer only translates them
into HTTP responses.
"""
