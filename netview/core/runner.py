from __future__ import annotations
import logging
import subprocess
from dataclasses import dataclass
from typing import Sequence, Optional

logger = logging.getLogger(__name__)

@dataclass
class RunResult:
    returncode: int
    stdout: str
    stderr: str

class Runner:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, args: Sequence[str], *, timeout: Optional[float] = None, **subprocess_kwargs) -> RunResult:
        """Run a command and capture stdout/stderr as text.

        Never raises on a non-zero exit; callers inspect RunResult.returncode.
        FileNotFoundError, other OSErrors and subprocess.TimeoutExpired propagate.
        """
        logger.debug("running: %s", " ".join(map(str, args)))
        c = subprocess.run(
            args,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            timeout=timeout if timeout is not None else self.timeout,
            **subprocess_kwargs,
        )
        logger.debug("exit status %d", c.returncode)
        return RunResult(c.returncode, c.stdout, c.stderr)
