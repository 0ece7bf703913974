from tree_api.services import health as healthService
from tree_api.services import tree as treeService

__all__ = ["healthService", "treeService"]
