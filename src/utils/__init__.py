"""Shared utilities for logging and config IO."""
