"""Domain layer: error taxonomy and pure path helpers."""
