from cssbuilder.model.category import Category
from cssbuilder.model.selector import Selector

__all__ = ["Category", "Selector"]
