"""Include path resolution and lazy include walking."""

from asmnav.resolve.includes import FileSystemAccessor, IncludeResolver, LocalFileSystem
from asmnav.resolve.paths import QuotedPath, find_quoted_path, resolve_include_path

__all__ = [
    "FileSystemAccessor",
    "IncludeResolver",
    "LocalFileSystem",
    "QuotedPath",
    "find_quoted_path",
    "resolve_include_path",
]
