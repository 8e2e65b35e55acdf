"""Infrastructure Layer - concrete implementations of domain protocols."""
