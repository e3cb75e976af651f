"""Store configuration."""
from __future__ import annotations

from dataclasses import dataclass

from docstore_lite.log import Logger


@dataclass(frozen=True, slots=True)
class Options:
    """Knobs passed to open_store().

    logger: where store messages go. None means a ConsoleLogger at INFO.
    sweep_temp_files: remove leftover *.json.tmp files when the store opens.
    """
    logger: Logger | None = None
    sweep_temp_files: bool = False
