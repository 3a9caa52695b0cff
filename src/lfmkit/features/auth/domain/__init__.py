"""Authentication domain types."""
