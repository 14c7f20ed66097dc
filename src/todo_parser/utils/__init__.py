"""Utility helpers for todo-parser."""
