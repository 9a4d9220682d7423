"""Rich progress bar for restoring markers from the store."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from symbolsync.contracts.progress import RestoreProgress


class RichRestoreProgress(RestoreProgress):
    """One bar over the stored records, with a running skipped count.

    The bar disappears when the pass ends; records that were skipped are
    summarised on the console afterwards::

        with RichRestoreProgress() as progress:
            MarkerSet.from_config(config, progress=progress).restore()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            TextColumn("Restoring markers"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TextColumn("[yellow]{task.fields[skipped]} skipped"),
            console=self._console,
            transient=True,
        )
        self._task: TaskID | None = None
        self._reasons: list[str] = []

    def __enter__(self) -> RichRestoreProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()
        if self._reasons:
            self._console.print(f"[yellow]Skipped {len(self._reasons)} stored marker(s):[/]")
            for reason in self._reasons:
                self._console.print(f"  {reason}", markup=False, highlight=False)

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(self._reasons)

    def started(self, total: int) -> None:
        self._reasons.clear()
        self._task = self._progress.add_task("restore", total=total, skipped=0)

    def restored(self, symbol_id: str) -> None:
        if self._task is not None:
            self._progress.advance(self._task)

    def skipped(self, reason: str) -> None:
        self._reasons.append(reason)
        if self._task is not None:
            self._progress.update(self._task, advance=1, skipped=len(self._reasons))

    def finished(self, restored: int, skipped: int) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=restored + skipped)

    def failed(self, error: BaseException) -> None:
        if self._task is not None:
            self._progress.stop_task(self._task)
        self._console.print(f"[red]Restore aborted:[/] {error}", highlight=False)
