"""Configuration constants, models and schemas."""
