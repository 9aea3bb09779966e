"""Rendering of algorithm displays."""
