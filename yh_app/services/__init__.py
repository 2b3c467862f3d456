"""Application services for yarn-helper."""
