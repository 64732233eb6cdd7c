"""Exception hierarchy for runfile.

Every failure the user can see derives from :class:`RunfileError`; the CLI
prints ``str(exc)`` after an ``error:`` prefix and exits with status 1.
"""

from __future__ import annotations


class RunfileError(Exception):
    """Base class for all user-facing runfile failures."""


class UsageError(RunfileError):
    """The command line was malformed."""


class UnsupportedExtension(RunfileError):
    """The source file's extension is not in the runner table."""

    def __init__(self, extension: str, path: str | None = None) -> None:
        self.extension = extension
        if extension:
            message = f"unsupported file type: {extension}"
        else:
            message = f"could not determine file extension of {path}"
        super().__init__(message)


class ParseError(RunfileError):
    """Rust source could not be parsed for dependency extraction."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ManifestError(RunfileError):
    """An existing Cargo.toml could not be read or understood."""


class ProcessError(RunfileError):
    """A child process could not be launched or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class BuildError(ProcessError):
    """``cargo run`` failed; carries the captured standard error."""

    def __init__(
        self,
        message: str,
        stderr: str,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        self.stderr = stderr
        super().__init__(message, command=command, returncode=returncode)

    def __str__(self) -> str:
        headline = super().__str__()
        detail = self.stderr.strip()
        return f"{headline}\n{detail}" if detail else headline
