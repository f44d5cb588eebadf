"""Core body metrics domain: value objects, ports, exceptions."""
