"""Shared TUI building blocks."""
