"""Core runtime, services, errors and debug logging."""
