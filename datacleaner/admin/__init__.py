"""
Admin settings tree.

Public API:
    AdminRoot        : root of the tree, indexes every node by name
    AdminCategory    : grouping node
    AdminSettingPage : page of settings, gated by a capability
    AdminSetting     : a single stored setting
    build_admin_tree : assemble the cleaner section of the tree
"""

from .builder import build_admin_tree
from .tree import AdminCategory, AdminRoot, AdminSetting, AdminSettingPage

__all__ = ["AdminCategory", "AdminRoot", "AdminSetting", "AdminSettingPage", "build_admin_tree"]
