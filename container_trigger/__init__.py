"""Trigger container builds in a GitHub repository via repository_dispatch."""
