"""Identity application layer."""
