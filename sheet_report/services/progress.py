from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Page synthesis progress display with tqdm (TTY only).

A single tqdm instance is created per run and disabled when stdout is not a
TTY, so CI logs and captured test output stay free of ANSI control sequences.
"""

__all__ = [
    "PageProgress",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Check if TTY output is enabled.

    Returns:
        True if stdout is a TTY and progress should be displayed, False otherwise
    """
    return sys.stdout.isatty()


class PageProgress:
    """Progress bar over synthesized pages."""

    def __init__(self, total_pages: int, *, description: str = "Generating pages") -> None:
        self.total_pages = total_pages
        self.description = description
        self.current_page = 0

        # 1ページしかない場合はバー不要
        self.enabled = is_tty_enabled() and total_pages > 1
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_pages,
                desc=description,
                unit="page",
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, rows: int) -> None:
        """Mark one page as done.

        Args:
            rows: number of rows generated for that page
        """
        self.current_page += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_postfix(rows=rows)
            self.pbar.update(1)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> PageProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
