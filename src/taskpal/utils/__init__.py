"""Shared helpers for taskpal."""
