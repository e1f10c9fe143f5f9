"""Mortgage and property investment calculator."""
