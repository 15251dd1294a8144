"""Error taxonomy for site builds: configuration, I/O, structural and join failures"""

from pathlib import Path


class SiteError(Exception):
    """Base class for every failure raised while building a site."""


# --- configuration ---

class ConfigError(SiteError):
    """Unreadable or invalid structured configuration."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class MetadataParseError(ConfigError):
    """A `templateinfo` block could not be deserialized into PageMetadata."""


class HandlerConfigError(ConfigError):
    """A handler block body is not valid configuration for that handler."""


# --- I/O ---

class ResourceError(SiteError):
    """Reading or writing a file failed; carries the offending path."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class AssetError(ResourceError):
    """Reading an embeddable asset failed."""


# --- structural ---

class StructuralError(SiteError):
    """A document is well-formed markup but cannot be built as a page."""

    def __init__(self, document: Path, detail: str):
        self.document = document
        self.detail = detail
        super().__init__(f"{document}: {detail}")


class TemplateInfoMissing(StructuralError):
    def __init__(self, document: Path):
        super().__init__(document, "no templateinfo block found")


class MissingHandler(StructuralError):
    def __init__(self, document: Path, name: str):
        self.name = name
        super().__init__(document, f"no handler registered for {name!r}")


class PathPrefixError(StructuralError):
    def __init__(self, document: Path, root: Path):
        self.root = root
        super().__init__(document, f"not located under content root {root}")


class InclusionDepthExceeded(StructuralError):
    def __init__(self, document: Path, depth: int):
        self.depth = depth
        super().__init__(document, f"render depth {depth} exceeds the configured max_depth")


# --- orchestration ---

class TaskJoinError(SiteError):
    """A document task failed with an unexpected (non-site) exception."""

    def __init__(self, task: str, cause: BaseException):
        self.task = task
        self.cause = cause
        super().__init__(f"task {task} failed: {cause!r}")


class BuildFailed(SiteError):
    """One or more documents failed; raised after every task has finished."""

    def __init__(self, errors: list[SiteError]):
        self.errors = errors
        super().__init__(f"{len(errors)} document(s) failed to build")
