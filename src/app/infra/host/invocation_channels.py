"""Canais de entrada/saída de uma invocação do plugin.

- StdioInvocation: host executa o plugin como subprocesso (stdin/stdout)
- BytesInvocation: payload já em memória (CLI `--job`, testes)
"""

from __future__ import annotations

import json
import sys
from typing import BinaryIO, TextIO

from app.protocols.invocation_io import InvocationIOProtocol


class StdioInvocation(InvocationIOProtocol):
    """Lê o input de stdin e escreve output em stdout.

    O erro da invocação vai para stderr como uma linha JSON
    `{"error": "..."}`, separado dos logs pelo campo.
    """

    def __init__(
        self,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = stdin or sys.stdin.buffer
        self._stdout = stdout or sys.stdout.buffer
        self._stderr = stderr or sys.stderr

    def read_input(self) -> bytes:
        return self._stdin.read()

    def write_output(self, data: bytes) -> None:
        self._stdout.write(data)
        self._stdout.flush()

    def set_error(self, message: str) -> None:
        self._stderr.write(json.dumps({"error": message}) + "\n")
        self._stderr.flush()


class BytesInvocation(InvocationIOProtocol):
    """Canal em memória: input fixo, output e erro capturados."""

    def __init__(self, input_data: bytes | str = b"") -> None:
        self._input = input_data.encode("utf-8") if isinstance(input_data, str) else input_data
        self.output = b""
        self.error: str | None = None

    def read_input(self) -> bytes:
        return self._input

    def write_output(self, data: bytes) -> None:
        self.output += data

    def set_error(self, message: str) -> None:
        self.error = message
