# prompts.py

from rich.console import Console


class TerminalInput:
    """
    Interactive input source backed by the terminal.
    Anything with the same ask() signature can stand in for it (scripted answers in tests).
    """

    def __init__(self, console: Console = None):
        """
        :param console: Optional rich Console. Defaults to a new stdout console.
        """
        self.console = console if console else Console()

    def ask(self, question: str, default: str = None, secret: bool = False) -> str:
        """
        Print the question highlighted and block for one line of input.
        secret=True reads without echoing. Empty answers fall back to default.
        """
        answer = self.console.input(f"[bold blue]{question}[/bold blue]", password=secret)
        answer = answer.strip()
        if answer == "" and default is not None:
            return default
        return answer
