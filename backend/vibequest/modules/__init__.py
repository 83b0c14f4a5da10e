"""Business modules."""
