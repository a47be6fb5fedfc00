"""Utilities shared across fractalcomplex modules."""
