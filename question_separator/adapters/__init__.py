"""Output adapters for separation results."""
