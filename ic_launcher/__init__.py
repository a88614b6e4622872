"""Forgotten-commands launcher domain (iforgor)."""
