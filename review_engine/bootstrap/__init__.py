"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers can
obtain fully built services without importing infrastructure directly.
"""
