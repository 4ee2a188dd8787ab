"""Flat-file task storage.

One canonical task encoding per line, UTF-8, newline-terminated, no header.
The whole file is rewritten on every save.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from chatbot_cli.exceptions import CorruptRecord
from chatbot_cli.models.task import Task, decode_task, encode_task

logger = logging.getLogger(__name__)


class FileStore:
    """Load and save tasks in a flat text file."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)

    def load(self) -> list[Task]:
        """Read every task from the file.

        A missing file is created empty. Blank lines are skipped.

        Returns:
            Tasks in file order.

        Raises:
            CorruptRecord: At the first line that cannot be decoded; its
                ``loaded`` attribute holds the tasks read before that line.
        """
        self._ensure_file()
        tasks: list[Task] = []
        with open(self.path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                record = line.rstrip("\r\n")
                if not record.strip():
                    continue
                try:
                    tasks.append(decode_task(record))
                except CorruptRecord as e:
                    logger.warning(
                        "corrupt record at %s:%d: %r", self.path, line_number, record
                    )
                    raise CorruptRecord(record, line_number, tasks) from e
        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Overwrite the file with ``tasks``.

        I/O errors are logged, not raised.

        Returns:
            ``True`` if the file was written.
        """
        lines = [encode_task(task) + "\n" for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
        except OSError:
            logger.exception("failed to save tasks to %s", self.path)
            return False
        logger.debug("saved %d task(s) to %s", len(lines), self.path)
        return True
