"""Configuration and logging for the status service."""
