"""Packaged campus data."""
