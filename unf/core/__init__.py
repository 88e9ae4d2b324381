"""
core - unf Core Module

Provides filename transliteration, the filename codec, collision
resolution, filesystem backends and the traversal that renames paths.
"""

from .models_fs import (
    FILENAME_NUM_DIGITS,
    FilenameParts,
    UnixizeOptions,
    RenameOp,
    RenameResult,
    decompose,
    recompose,
)

from .text_match import (
    to_ascii,
    transliterate,
    is_unix_friendly,
)

from .fs_backend import (
    EntryMetadata,
    FileSystem,
    DiskFS,
    MemoryFS,
)

from .scan_files import (
    load_snapshot,
)

from .plan_rename import (
    split_path,
    resolve_name,
    resolve_collision,
    ConflictResolver,
)

from .exec_rename import (
    Unixizer,
    unixize,
    basename_of,
)

from .safety_checks import (
    InvalidFilenameError,
    check_utf8_name,
)

__all__ = [
    # Data models
    "FILENAME_NUM_DIGITS",
    "FilenameParts",
    "UnixizeOptions",
    "RenameOp",
    "RenameResult",
    "decompose",
    "recompose",

    # Text processing
    "to_ascii",
    "transliterate",
    "is_unix_friendly",

    # Filesystems
    "EntryMetadata",
    "FileSystem",
    "DiskFS",
    "MemoryFS",
    "load_snapshot",

    # Collision resolution
    "split_path",
    "resolve_name",
    "resolve_collision",
    "ConflictResolver",

    # Execution
    "Unixizer",
    "unixize",
    "basename_of",

    # Safety checks
    "InvalidFilenameError",
    "check_utf8_name",
]
