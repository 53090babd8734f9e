"""File ignore rules handling using pathspec."""

from pathlib import Path

import pathspec

from tealoop.constants import BUILTIN_IGNORES


class IgnoreRules:
    """Handles file ignore rules from .gitignore for the listing walk."""

    def __init__(self, root: Path):
        """Initialize ignore rules.

        Args:
            root: Root directory of the walk (where .gitignore is read)
        """
        self.root = root
        self.spec = self._build_spec()

    def _build_spec(self) -> pathspec.PathSpec:
        """Build combined PathSpec from built-ins and .gitignore."""
        patterns = list(BUILTIN_IGNORES)

        gitignore_path = self.root / ".gitignore"
        if gitignore_path.exists():
            try:
                with open(gitignore_path) as f:
                    patterns.extend(f.read().splitlines())
            except IOError:
                pass  # An unreadable .gitignore only loses its patterns

        # Filter out empty lines and comments
        patterns = [p.strip() for p in patterns if p.strip() and not p.strip().startswith("#")]

        return pathspec.PathSpec.from_lines("gitwildmatch", patterns)

    def should_ignore(self, path: Path, is_dir: bool = False) -> bool:
        """Check if a path should be ignored.

        Args:
            path: Path to check, under the walk root
            is_dir: Whether the path is a directory (directory-only
                patterns such as ``build/`` need the trailing slash)

        Returns:
            True if the path should be ignored
        """
        try:
            rel_path = path.relative_to(self.root)
        except ValueError:
            # Path is outside the walk root
            return True

        candidate = rel_path.as_posix()
        if is_dir:
            candidate += "/"
        return self.spec.match_file(candidate)

