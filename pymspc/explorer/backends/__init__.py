"""Computational backends for the explorer pipeline."""
