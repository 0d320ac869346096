"""Behavioral patterns - how objects share responsibility and communicate."""
