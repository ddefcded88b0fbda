"""Core types, configuration and logging shared across layers."""
