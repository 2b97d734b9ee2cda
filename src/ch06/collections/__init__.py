from .group import Group, GroupConfig, strict_equal

__all__ = [
    "Group",
    "GroupConfig",
    "strict_equal",
]
