from .tree_renderer import TreeRenderer, largest_row_size, row_bounds

__all__ = [
    "TreeRenderer",
    "largest_row_size",
    "row_bounds",
]
