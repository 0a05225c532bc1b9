"""Application layer — use cases over the settings port."""
