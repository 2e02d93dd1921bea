"""user-facing status messages for the command line."""

from rich.console import Console


class StatusReporter:
    """prints short, non-blocking status lines to stderr."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self._console = Console(stderr=True)

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(f"[red]ERROR:[/red] {message}")

    def log_info(self, message: str) -> None:
        """prints info message unless quiet."""
        if self.quiet:
            return

        self._console.print(message)

    def copy_result(self, copied: bool) -> None:
        """reports the outcome of a clipboard write."""
        if copied:
            self.log_info("[green]Copied![/green] HTML is on the clipboard")
        else:
            self.log_error("Could not copy HTML to the clipboard")
