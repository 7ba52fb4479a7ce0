"""System-wide error types and data models."""
