"""Workspace services."""
