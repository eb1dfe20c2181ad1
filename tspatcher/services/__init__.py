"""Services: one per subcommand, each acting on an explicit Workspace."""

from .build import BuildService
from .clean import CleanService
from .fetch import FetchService
from .patch import DescriptorChanges, PatchService
from .publish import PublishService

__all__ = [
    "BuildService",
    "CleanService",
    "DescriptorChanges",
    "FetchService",
    "PatchService",
    "PublishService",
]
