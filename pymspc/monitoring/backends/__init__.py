"""Computational backends for Hotelling T2 monitoring."""
