"""Interactive front-end for yarn-helper."""
