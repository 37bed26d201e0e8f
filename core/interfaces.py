from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain.project import Project
from core.domain.wbs import WbsNode


class ProjectRepository(ABC):
    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...


class WbsRepository(ABC):
    @abstractmethod
    def get(self, node_id: str) -> Optional[WbsNode]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[WbsNode]: ...


__all__ = ["ProjectRepository", "WbsRepository"]
