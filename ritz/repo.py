"""Repository detection, errors and initialisation."""

from __future__ import annotations

from pathlib import Path

RITZ_DIR = Path(".ritz")
NOT_A_REPOSITORY = "This is not a ritz repository. Run 'ritz init' to initialize one."


class RitzError(Exception):
    """Base error for repository operations."""


class NotInitializedError(RitzError):
    """Raised when the current directory is not a ritz repository."""


class AlreadyInitializedError(RitzError):
    """Raised when initialising a directory that already holds a repository."""


def is_initialized() -> bool:
    """Return whether the current directory holds a ``.ritz`` repository."""
    return RITZ_DIR.exists()


def require_initialized() -> None:
    """Raise ``NotInitializedError`` unless the current directory is a repository."""
    if not is_initialized():
        raise NotInitializedError(NOT_A_REPOSITORY)


def list_files(directory: str | Path) -> list[Path]:
    """Return the entries of ``directory`` sorted by name."""
    return sorted(Path(directory).iterdir(), key=lambda entry: entry.name)


def init_repository() -> Path:
    """Create an empty repository in the current directory and return its path."""
    if is_initialized():
        raise AlreadyInitializedError(
            "The directory is already initialized as a ritz directory."
        )
    RITZ_DIR.mkdir()
    (RITZ_DIR / "objects").mkdir()
    (RITZ_DIR / "refs" / "heads").mkdir(parents=True)
    (RITZ_DIR / "HEAD").write_text("ref: refs/heads/master\n")
    return Path.cwd() / RITZ_DIR