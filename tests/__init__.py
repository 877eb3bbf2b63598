"""Test suite for icon search."""
