"""Logging setup for stringdict."""
