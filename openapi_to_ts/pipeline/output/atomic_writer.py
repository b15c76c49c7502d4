"""
Atomic file writer for generated files.

Ensures that file writes are atomic to prevent leaving half-written
declaration files behind after an interrupted run.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path

from ...logging_config import get_logger
from ..config import OutputConfig, OutputMode
from ..errors import OutputError

logger = get_logger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        config: OutputConfig | None = None,
        validate: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            config: Output configuration (mode, validation, atomicity)
            validate: Optional validation function for rendered TypeScript
        """
        self.config = config or OutputConfig()
        self._validate = validate or self._default_validate

    def write(self, path: Path, content: str) -> None:
        """Write content to file.

        Raises:
            OutputError: If the file exists in error mode or validation fails
            OSError: If file operations fail
        """
        if self.config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if self.config.validate_before_write:
            self._validate(content)

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.config.atomic_write:
            path.write_text(content, encoding="utf-8")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_all(self, root: Path, files: Mapping[str, str]) -> list[Path]:
        """Write rendered files keyed by module path under ``root``.

        Every file is checked before anything is written.

        Returns:
            The written paths, in module path order
        """
        for module_path in sorted(files):
            if self.config.mode == OutputMode.ERROR_IF_EXISTS and (root / module_path).exists():
                raise OutputError(f"Output file already exists: {root / module_path}. Use force mode to overwrite.")
            if self.config.validate_before_write:
                self._validate(files[module_path])

        written = []
        for module_path in sorted(files):
            target = root / module_path
            self.write(target, files[module_path])
            written.append(target)

        logger.info("Wrote %d files to %s", len(written), root)
        return written

    def _default_validate(self, content: str) -> None:
        """Basic structural check of rendered TypeScript, ignoring doc comments.

        Raises:
            OutputError: If braces are unbalanced
        """
        code = "\n".join(line for line in content.split("\n") if not line.lstrip().startswith(("/**", "*")))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputError(f"Generated TypeScript has unbalanced braces: {open_braces} open, {close_braces} close")
