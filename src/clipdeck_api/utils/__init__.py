"""Utility modules for the Clipdeck API client."""
