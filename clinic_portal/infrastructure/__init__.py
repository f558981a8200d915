"""Infrastructure: persistence, security, and external services."""
