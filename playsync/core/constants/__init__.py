"""Static configuration data."""
