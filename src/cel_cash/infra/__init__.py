"""Implementações concretas de IO (HTTP e cache)."""
