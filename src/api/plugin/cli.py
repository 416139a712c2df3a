"""Entrypoint de processo do plugin.

Uso (host executando o plugin como subprocesso):
    echo '{"from": "2024-01-01T00:00:00Z", "to": "2024-01-10T00:00:00Z"}' \
        | planner-import-plugin import-events

    planner-import-plugin meta
    planner-import-plugin check-config

O exit code do processo é o status code do export.
"""

from __future__ import annotations

import argparse
import sys

from api.plugin.exports import STATUS_FAILURE, STATUS_SUCCESS, import_events, meta
from app.bootstrap import initialize_plugin, validate_runtime_settings
from app.infra.host import BytesInvocation, StdioInvocation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planner-import-plugin",
        description="Importa eventos de uma fonte externa para o calendário do planner.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import-events", help="Executa uma importação.")
    import_parser.add_argument(
        "--job",
        default=None,
        help="ImportJob em JSON (padrão: lido de stdin).",
    )

    subparsers.add_parser("meta", help="Escreve o descritor do plugin em stdout.")
    subparsers.add_parser("check-config", help="Valida settings e allow-list de rede.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    initialize_plugin()

    if args.command == "meta":
        return meta(StdioInvocation())

    if args.command == "check-config":
        try:
            validate_runtime_settings()
        except RuntimeError as exc:
            print(exc, file=sys.stderr)
            return STATUS_FAILURE
        return STATUS_SUCCESS

    io = BytesInvocation(args.job) if args.job is not None else StdioInvocation()
    return import_events(io)


if __name__ == "__main__":
    sys.exit(main())
