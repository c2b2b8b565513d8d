"""Backend-specific sort renderers."""
