"""Filesystem storage for uploaded media."""
