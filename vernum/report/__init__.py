"""vernum report — table and JSON output for version families."""

from vernum.report.serializer import groups_to_dict, groups_to_json
from vernum.report.table import print_groups, render_groups

__all__ = [
    "groups_to_dict",
    "groups_to_json",
    "print_groups",
    "render_groups",
]
