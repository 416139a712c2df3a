"""Testes dos canais de entrada/saída da invocação."""

from __future__ import annotations

import io
import json

from app.infra.host import BytesInvocation, StdioInvocation
from app.protocols import InvocationIOProtocol


def test_bytes_invocation_captures_output_and_error() -> None:
    channel = BytesInvocation('{"from": "x"}')

    channel.write_output(b"a")
    channel.write_output(b"b")
    channel.set_error("boom")

    assert channel.read_input() == b'{"from": "x"}'
    assert channel.output == b"ab"
    assert channel.error == "boom"


def test_bytes_invocation_defaults() -> None:
    channel = BytesInvocation()
    assert channel.read_input() == b""
    assert channel.error is None


def test_stdio_invocation_uses_given_streams() -> None:
    stdin = io.BytesIO(b"job")
    stdout = io.BytesIO()
    stderr = io.StringIO()
    channel = StdioInvocation(stdin, stdout, stderr)

    assert channel.read_input() == b"job"
    channel.write_output(b"out")
    channel.set_error("failed to fetch events: x")

    assert stdout.getvalue() == b"out"
    assert json.loads(stderr.getvalue()) == {"error": "failed to fetch events: x"}


def test_channels_satisfy_protocol() -> None:
    assert isinstance(BytesInvocation(), InvocationIOProtocol)
    assert isinstance(StdioInvocation(io.BytesIO(), io.BytesIO(), io.StringIO()), InvocationIOProtocol)
