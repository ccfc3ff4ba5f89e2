"""Core scoring primitives and configuration."""
