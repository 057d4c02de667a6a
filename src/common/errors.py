"""Fatal bootstrap failure."""

from __future__ import annotations


class BootstrapError(RuntimeError):
    """Aborts the bootstrap run.

    ``returncode`` is the process exit status the CLI should use: the exit
    code of the failing subprocess where there is one, otherwise 1.
    """

    def __init__(self, message: str, returncode: int = 1) -> None:
        super().__init__(message)
        self.returncode = returncode
