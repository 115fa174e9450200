"""Ports and small shared primitives."""
