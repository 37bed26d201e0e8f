from core.domain.enums import Severity, StatusKind, WbsNodeType
from core.domain.identifiers import generate_id
from core.domain.project import Project
from core.domain.values import Money, Percent
from core.domain.wbs import WbsNode

__all__ = [
    "generate_id",
    "WbsNodeType",
    "Severity",
    "StatusKind",
    "Money",
    "Percent",
    "Project",
    "WbsNode",
]
