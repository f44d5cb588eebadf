"""Body metrics use cases."""
