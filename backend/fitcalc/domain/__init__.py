"""Domain layer: pure body metrics calculations."""
