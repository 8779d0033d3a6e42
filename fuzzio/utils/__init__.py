"""Utility helpers: ready-made normalizers and logging formatters."""
