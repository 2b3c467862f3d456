from yh_ui.tui.adapters.chooser import ChooserAdapter, PrompterAdapter, option_to_item

__all__ = ["ChooserAdapter", "PrompterAdapter", "option_to_item"]
