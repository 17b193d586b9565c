"""Property management API."""
