"""
Scanner Configuration
=====================

Options that control a scan run. Configuration can come from:
- Default values (defined here)
- Keyword arguments
- Environment variables (ScanOptions.from_env)

Environment variables (all optional):
    MINIADA_START_LINE: Line number of the first input line (integer >= 1)
    MINIADA_STRICT: Stop at the first error token ("1", "true", "yes")
    MINIADA_ENCODING: Text encoding used to open source files
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScanOptions:
    """
    Scan configuration options.

    Attributes:
        start_line: Line number reported for the first line of input.
                    Useful when scanning a fragment cut out of a larger file.
        strict: If True, tokenize() raises a ScanError at the first error
                token instead of yielding it.
        encoding: Encoding used by scan_file() to open the source.
        filename: Name used in error locations.
    """
    start_line: int = 1
    strict: bool = False
    encoding: str = "utf-8"
    filename: str = "<input>"

    def __post_init__(self):
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")

    @classmethod
    def from_env(cls, **overrides) -> "ScanOptions":
        """
        Create ScanOptions from environment variables.

        Keyword arguments are applied after the environment and win over it.
        Invalid integer values are ignored.
        """
        options = cls()

        if start_line := os.environ.get("MINIADA_START_LINE"):
            try:
                value = int(start_line)
            except ValueError:
                value = 0
            if value >= 1:
                options.start_line = value

        if strict := os.environ.get("MINIADA_STRICT"):
            options.strict = strict.strip().lower() in _TRUE_VALUES

        if encoding := os.environ.get("MINIADA_ENCODING"):
            options.encoding = encoding

        for name, value in overrides.items():
            if value is not None:
                setattr(options, name, value)
        options.__post_init__()

        return options
