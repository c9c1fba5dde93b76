from cssbuilder.builder.facade import SelectorBuilder, css_selector_builder

__all__ = ["SelectorBuilder", "css_selector_builder"]
