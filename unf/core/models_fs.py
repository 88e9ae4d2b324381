"""
models_fs.py - Core Data Structure Definitions

Contains:
- FilenameParts: Filename split into stem, collision counter and extension
- UnixizeOptions: Run options configuration
- RenameOp: Single rename operation
- RenameResult: Renames performed (or simulated) during one run
"""

from dataclasses import dataclass, field, replace
from typing import Optional, List


# Minimum width of the zero-padded collision counter
FILENAME_NUM_DIGITS = 3


@dataclass(frozen=True)
class FilenameParts:
    """Filename that can be split, modified and merged back into a string"""
    stem: str                               # Up to the counter / final dot
    counter: Optional[int] = None           # Collision-resolving number
    extension: Optional[str] = None         # After the final dot, without the dot

    @classmethod
    def from_filename(cls, filename: str) -> "FilenameParts":
        """
        Split filename into its parts

        Only the content after the final dot is the extension. A name
        without any dot has no extension, a name ending in a dot has an
        empty one. A leading dot is a separator like any other, so ".a"
        has an empty stem and the extension "a".

        Args:
            filename: Non-empty filename (no directory part)

        Returns:
            FilenameParts
        """
        if not filename:
            raise ValueError("tried to split empty filename")

        stem_num, dot, ext = filename.rpartition(".")
        if dot:
            extension: Optional[str] = ext
        else:
            stem_num, extension = ext, None

        # The last FILENAME_NUM_DIGITS + 1 characters hold "_NNN" when the
        # name carries a counter
        tail = stem_num[-(FILENAME_NUM_DIGITS + 1):]
        digits = tail[1:]
        counter = None
        if (len(tail) == FILENAME_NUM_DIGITS + 1 and tail[0] == "_"
                and all(c in "0123456789" for c in digits)):
            counter = int(digits)
            stem_num = stem_num[:-(FILENAME_NUM_DIGITS + 1)]

        return cls(stem=stem_num, counter=counter, extension=extension)

    def merge(self) -> str:
        """Merge parts back into a filename"""
        name = self.stem
        if self.counter is not None:
            name += f"_{self.counter:0{FILENAME_NUM_DIGITS}d}"
        if self.extension is not None:
            name += f".{self.extension}"
        return name

    def bumped(self) -> "FilenameParts":
        """Next collision candidate: counter + 1, or 0 when there is none"""
        counter = 0 if self.counter is None else self.counter + 1
        return replace(self, counter=counter)


def decompose(filename: str) -> FilenameParts:
    return FilenameParts.from_filename(filename)


def recompose(parts: FilenameParts) -> str:
    return parts.merge()


@dataclass(frozen=True)
class UnixizeOptions:
    """Run options configuration"""
    recursive: bool = False         # Descend into directories
    force: bool = False             # Never prompt, rename everything
    dry_run: bool = False           # Only report what would be renamed
    quiet: bool = False             # Do not report renames on stdout

    def __post_init__(self):
        if self.force and self.dry_run:
            raise ValueError("force and dry_run are mutually exclusive")

    @property
    def interactive(self) -> bool:
        """Whether the user is asked before descending and renaming"""
        return not (self.force or self.dry_run)

    @classmethod
    def from_args(cls, args) -> "UnixizeOptions":
        """Create options from an argparse namespace"""
        return cls(
            recursive=args.recursive,
            force=args.force,
            dry_run=args.dry_run,
            quiet=getattr(args, "quiet", False),
        )


@dataclass
class RenameOp:
    """Single rename operation"""
    src: str                        # Source path (display form)
    dst: str                        # Destination path (display form)
    note: str = ""                  # Note (e.g., conflict resolution explanation)

    def describe(self, dry_run: bool = False) -> str:
        """Line announcing the rename"""
        verb = "would rename" if dry_run else "rename"
        return f"{verb} '{self.src}' -> '{self.dst}'"


@dataclass
class RenameResult:
    """Outcome of one run"""
    renamed: List[RenameOp] = field(default_factory=list)   # Performed or simulated
    skipped: List[RenameOp] = field(default_factory=list)   # Declined at a prompt
    dry_run: bool = False

    @property
    def renamed_count(self) -> int:
        return len(self.renamed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def conflict_count(self) -> int:
        """Number of conflict resolutions"""
        return sum(1 for op in self.renamed if op.note.startswith("conflict resolved"))

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Simulated Result:" if self.dry_run else "Execution Result:",
            f"  - Renamed: {self.renamed_count}",
            f"  - Conflict resolutions: {self.conflict_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        return "\n".join(lines)
