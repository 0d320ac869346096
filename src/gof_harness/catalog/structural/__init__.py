"""Structural patterns - how objects and classes are composed."""
