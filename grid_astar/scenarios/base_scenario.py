from abc import ABC, abstractmethod

from ..config import GridConfig, SearchConfig
from ..core.problem import GridSearchProblem


class BaseScenario(ABC):
    """Abstract base class for grid construction scenarios."""

    @abstractmethod
    def build(self, grid_cfg: GridConfig, search_cfg: SearchConfig) -> GridSearchProblem:
        """Return a ready-to-search problem built from configuration."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return a human readable name for the scenario."""
        pass
