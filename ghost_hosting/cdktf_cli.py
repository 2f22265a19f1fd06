# cdktf_cli.py

import shlex
import subprocess

from .console import log


class CommandError(Exception):
    """An external command could not be started or exited non-zero."""

    def __init__(self, cmd: str, returncode: int = None, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Command not found: {cmd}"
        else:
            message = f"Command failed ({returncode}): {cmd}"
        super().__init__(message)


class CdktfService:
    """
    Runs the cdktf command line, which owns plan, apply, destroy and state.
    """

    def __init__(self, logger=None):
        """
        :param logger: Optional logging function. Defaults to terminal output.
        """
        self.logger = logger if logger else log

    def run_cmd(self, cmd, check=True, stream=False):
        """
        Runs a command via subprocess. If check=True, raises CommandError on a non-zero exit.
        stream=True logs output line by line while the command runs (stderr merged into stdout).
        Returns (stdout, stderr).
        """
        self._log(f"[RUN] {cmd}\n")
        if stream:
            return self._run_streaming(cmd, check)
        try:
            process = subprocess.Popen(
                shlex.split(cmd), stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True
            )
        except FileNotFoundError as ex:
            raise CommandError(cmd) from ex
        stdout, stderr = process.communicate()

        if stdout:
            self._log(stdout)
        if stderr:
            self._log(stderr)

        if check and process.returncode != 0:
            raise CommandError(cmd, process.returncode, stderr)

        return stdout, stderr

    def _run_streaming(self, cmd, check):
        try:
            process = subprocess.Popen(
                shlex.split(cmd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                bufsize=1,
            )
        except FileNotFoundError as ex:
            raise CommandError(cmd) from ex

        lines = []
        for line in process.stdout:
            lines.append(line)
            self._log(line)
        process.stdout.close()
        returncode = process.wait()
        stdout = "".join(lines)

        if check and returncode != 0:
            raise CommandError(cmd, returncode, stdout)

        return stdout, ""

    def _log(self, msg):
        """Helper to send logs to self.logger."""
        if callable(self.logger):
            self.logger(msg)
        else:
            print(msg, end="")
