"""Computational backends for multivariate normal sampling."""
