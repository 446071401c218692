"""Shortest subway paths and their fares over a multi-line network."""
