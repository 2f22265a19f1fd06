# console.py

from rich.console import Console
from rich.style import Style
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

STYLES = {
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow", bold=True),
    "success": Style(color="green", bold=True),
}


def log(msg: str):
    """Default logger: send tagged lines straight to the terminal."""
    print(msg, end="", flush=True)


def print_error(message: str) -> None:
    err_console.print(Text(f"[ERROR] {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    console.print(Text(message, style=STYLES["warning"]))


def print_success(message: str) -> None:
    console.print(Text(message, style=STYLES["success"]))
