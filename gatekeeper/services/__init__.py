"""Service layer: user authentication and model registry."""
