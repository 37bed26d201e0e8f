from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.domain.wbs import WbsNode

_CODE_PART = re.compile(r"(\d+)")


@dataclass
class WbsTreeNode:
    node: WbsNode
    children: List["WbsTreeNode"] = field(default_factory=list)


def wbs_code_key(code: str) -> Tuple:
    """Natural ordering key so that "1.10" sorts after "1.9"."""
    parts = []
    for chunk in _CODE_PART.split(code or ""):
        if not chunk or chunk == ".":
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk.strip(".").lower()))
    return tuple(parts)


def sort_by_code(nodes: Iterable[WbsNode]) -> List[WbsNode]:
    return sorted(nodes, key=lambda n: wbs_code_key(n.code))


def index_by_id(nodes: Iterable[WbsNode]) -> Dict[str, WbsNode]:
    return {n.id: n for n in nodes}


def children_by_parent(nodes: Iterable[WbsNode]) -> Dict[Optional[str], List[WbsNode]]:
    grouped: Dict[Optional[str], List[WbsNode]] = {}
    for node in nodes:
        grouped.setdefault(node.parent_id, []).append(node)
    return grouped


def descendants(node_id: str, children: Dict[Optional[str], List[WbsNode]]) -> List[WbsNode]:
    out: List[WbsNode] = []
    stack = list(reversed(children.get(node_id, [])))
    while stack:
        current = stack.pop()
        out.append(current)
        stack.extend(reversed(children.get(current.id, [])))
    return out


def build_hierarchy(nodes: Sequence[WbsNode]) -> List[WbsTreeNode]:
    """
    Build the WBS forest with siblings in WBS code order.

    Expects a validated snapshot: every parent_id resolves within `nodes`.
    """
    children = children_by_parent(nodes)

    def _build(node: WbsNode) -> WbsTreeNode:
        kids = sort_by_code(children.get(node.id, []))
        return WbsTreeNode(node=node, children=[_build(k) for k in kids])

    return [_build(root) for root in sort_by_code(children.get(None, []))]


__all__ = [
    "WbsTreeNode",
    "wbs_code_key",
    "sort_by_code",
    "index_by_id",
    "children_by_parent",
    "descendants",
    "build_hierarchy",
]
