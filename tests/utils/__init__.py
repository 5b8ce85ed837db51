"""Test utilities for Orderly."""
