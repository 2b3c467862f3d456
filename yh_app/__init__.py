"""Application layer for yarn-helper: menus, resolution and command building."""
