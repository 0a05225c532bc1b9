"""Domain layer — settings model, errors and ports."""
