"""Colour parsing and WCAG contrast math."""
