"""
Selection of subtrees: filter rules and the selection engine.
"""

from .engine import DepthStatus, FilterSuccess, SelectionEngine, filter_node, find_first
from .filter import Filter
from .node_kinds import NodeKindFilter
from .rules import AttributeRules, ElementState, NameRules

__all__ = [
    'Filter',
    'NodeKindFilter',
    'ElementState',
    'NameRules',
    'AttributeRules',
    'DepthStatus',
    'FilterSuccess',
    'SelectionEngine',
    'filter_node',
    'find_first',
]
