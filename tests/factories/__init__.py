"""Model factories for tests."""
