"""Run the external fragment generator and check that it produced its header."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("python3", "ia/server.py")
DEFAULT_HEADER = "include/fragmentos.h"


class AIError(RuntimeError):
    """The generator could not be run or did not produce its output."""


def run_ai(
    command: str | Sequence[str] = DEFAULT_COMMAND,
    header_path: str | os.PathLike[str] = DEFAULT_HEADER,
) -> str:
    """Run ``command``, echo its output and return it; then require ``header_path``.

    A string command is run through the shell.
    """
    logger.debug("working directory: %s", Path.cwd())
    print("Executando IA...", flush=True)

    shell = isinstance(command, str)
    args = command if shell else list(command)
    lines: list[str] = []
    try:
        with subprocess.Popen(
            args, shell=shell, stdout=subprocess.PIPE, text=True
        ) as process:
            assert process.stdout is not None
            for line in process.stdout:
                sys.stdout.write(line)
                lines.append(line)
    except OSError as exc:
        raise AIError(f"Erro ao executar script da IA: {exc}") from exc
    sys.stdout.flush()

    header = Path(header_path)
    logger.debug("opening %s", header)
    if not header.is_file():
        logger.debug("working directory: %s", Path.cwd())
        raise AIError(f"Erro: {header.name} não foi gerado.")

    print(f"Arquivo '{header.name}' carregado com sucesso.", flush=True)
    return "".join(lines)