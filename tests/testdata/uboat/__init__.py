"""Fixture package for scan tests."""
