"""Infrastructure adapters implementing core ports."""
