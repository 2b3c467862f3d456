from .main import app, ctx_store, main

__all__ = ["app", "main", "ctx_store"]


# Accessors for testing compatibility (monkeypatching).
# These map back to the global ctx_store in the main module.
def __getattr__(name):
    if name == "ui":
        return ctx_store.ui
    if name == "settings_repository":
        return ctx_store.settings_repository
    raise AttributeError(f"module {__name__} has no attribute {name}")
