"""Application layer: use cases over the body metrics domain."""
