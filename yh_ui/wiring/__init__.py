from yh_ui.wiring.dependencies import UIContext

__all__ = ["UIContext"]
