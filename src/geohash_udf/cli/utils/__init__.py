"""CLI helper utilities."""
