"""Infrastructure layer - adapters for domain protocols."""
