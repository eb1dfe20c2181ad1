"""Core domain types and logic."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .revision import (
    DevelopmentHead,
    ExplicitRevision,
    LatestPrerelease,
    LatestStable,
    RevisionSelector,
    select_revision,
)
from .workspace import Workspace, WorkspaceError, resolve_workspace

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # revision
    "DevelopmentHead",
    "ExplicitRevision",
    "LatestPrerelease",
    "LatestStable",
    "RevisionSelector",
    "select_revision",
    # workspace
    "Workspace",
    "WorkspaceError",
    "resolve_workspace",
]
