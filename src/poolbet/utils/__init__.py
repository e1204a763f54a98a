"""Shared helpers: logging, set combinatorics, decimal coercion."""
