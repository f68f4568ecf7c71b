"""
Command line front end.

Usage:
    pokelogs CheckLatency PokeAPI --start 01/03/2024 --end 07/03/2024
    pokelogs CheckAvailability PokeStats --Last30Days
    pokelogs RenderGraph PokeImages -N 10 --Latency
"""

import argparse
import logging
import sys
from datetime import date
from typing import Callable, Dict, List, Optional

from pokelogs.config import DEFAULT_PERIOD, LOG_FILE_PATH, LOG_LEVEL
from pokelogs.errors import InvalidArguments, ReportError, SourceUnavailable
from pokelogs.services.aggregator import Aggregator
from pokelogs.services.parser import LogParser
from pokelogs.services.reports import (
    ReportService,
    default_start,
    format_availability_rows,
    format_latency_rows,
    render_chart,
)
from pokelogs.services.storage import LogStore
from pokelogs.utils.helpers import format_day

LOGGER = logging.getLogger(__name__)

UNKNOWN_COMMAND = (
    "No existe ese comando. Commandos Disponibles: "
    "CheckLatency, CheckAvailability, RenderGraph."
)

HELP_TEXT = """Este CLI te permite hacer un resumen de un archivo llamado logs.
Tiene los siguientes comandos:

\tCheckAvailability <modulo>
\tTe permite ver la disponibilidad del <modulo> (PokeAPI,PokeStats,PokeImages)
\ten un rango especifico de dias

\topciones:

\t--LastNthDays=<numero>,-N <numero>
\tTe permite ver la disponibilidad de los ultimos <numero> dias (default: {period})

\t--Last3Days
\tTe permite ver la disponibilidad de los ultimos 3 dias

\t--Last30Days
\tTe permite ver la disponibilidad de los ultimos 30 dias

\tCheckLatency <modulo>
\tTe permite ver la latencia del <modulo> (PokeAPI,PokeStats,PokeImages)
\ten un rango especifico de dias

\topciones:

\t--start=dd/mm/yyyy, -s dd/mm/yyyy (valor default: {start})
\tDefine la fecha inicio del resumen

\t--end=dd/mm/yyyy, -e dd/mm/yyyy (valor default: {end})
\tDefine la fecha fin del resumen

\tRenderGraph <modulo>
\tTe permite ver el grafico de disponibilidad o latencia
\tdel <modulo> (PokeAPI,PokeStats,PokeImages)
\ten un rango especifico de dias

\topciones:

\t--Availability,-V (default)
\tHace que el grafico muestre la disponibilidad

\t--Latency,-L
\tHace que el grafico muestre la latencia

\t--LastNthDays=<numero>,-N <numero>
\tTe permite ver el grafico de los ultimos <numero> dias

\t--Last3Days
\tTe permite ver el grafico en los ultimos 3 dias

\t--Last30Days
\tTe permite ver el grafico en los ultimos 30 dias

\topciones generales:

\t--log-file=<ruta>
\tArchivo de logs a leer (default: {log_file})
"""


class CommandParser(argparse.ArgumentParser):
    """Reports bad option values as a ReportError instead of exiting"""

    def error(self, message):
        raise InvalidArguments(message)

    def parse_command(self, argv: List[str]) -> argparse.Namespace:
        args, ignored = self.parse_known_args(argv)
        if ignored:
            LOGGER.debug("%s: ignoring %s", self.prog, " ".join(ignored))
        return args


def _base_parser(prog: str) -> CommandParser:
    parser = CommandParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("module", nargs="?", help="PokeAPI, PokeImages o PokeStats")
    parser.add_argument("--log-file", default=LOG_FILE_PATH)
    return parser


def _add_period_options(parser: CommandParser) -> None:
    parser.add_argument(
        "-N", "--LastNthDays", dest="last_nth_days", type=int,
        nargs="?", const=DEFAULT_PERIOD, default=None,
    )
    parser.add_argument("--Last3Days", dest="last_3_days", action="store_true")
    parser.add_argument("--Last30Days", dest="last_30_days", action="store_true")


def build_latency_parser() -> CommandParser:
    parser = _base_parser("pokelogs CheckLatency")
    parser.add_argument("-s", "--start")
    parser.add_argument("-e", "--end")
    return parser


def build_availability_parser() -> CommandParser:
    parser = _base_parser("pokelogs CheckAvailability")
    _add_period_options(parser)
    return parser


def build_graph_parser() -> CommandParser:
    parser = _base_parser("pokelogs RenderGraph")
    _add_period_options(parser)
    parser.add_argument("-V", "--Availability", dest="availability", action="store_true")
    parser.add_argument("-L", "--Latency", dest="latency", action="store_true")
    return parser


def _service(args: argparse.Namespace, today: date) -> ReportService:
    aggregator = Aggregator(LogStore(args.log_file), LogParser())
    return ReportService(aggregator, today=today)


def check_latency(argv: List[str], today: date) -> List[str]:
    args = build_latency_parser().parse_command(argv)
    rows = _service(args, today).latency_report(args.module, args.start, args.end)
    return format_latency_rows(rows)


def check_availability(argv: List[str], today: date) -> List[str]:
    args = build_availability_parser().parse_command(argv)
    rows = _service(args, today).availability_report(
        args.module, args.last_nth_days, args.last_3_days, args.last_30_days
    )
    return format_availability_rows(rows)


def render_graph(argv: List[str], today: date) -> List[str]:
    args = build_graph_parser().parse_command(argv)
    report = _service(args, today).chart_report(
        args.module,
        args.last_nth_days,
        args.last_3_days,
        args.last_30_days,
        latency=args.latency,
    )
    return render_chart(report)


COMMANDS: Dict[str, Callable[[List[str], date], List[str]]] = {
    "CheckLatency": check_latency,
    "CheckAvailability": check_availability,
    "RenderGraph": render_graph,
}


def help_text(today: date) -> str:
    return HELP_TEXT.format(
        period=DEFAULT_PERIOD,
        start=format_day(default_start(today)),
        end=format_day(today),
        log_file=LOG_FILE_PATH,
    )


def main(argv: Optional[List[str]] = None, today: Optional[date] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    argv = list(sys.argv[1:] if argv is None else argv)
    today = today or date.today()

    if "-h" in argv or "--help" in argv:
        print(help_text(today))
        return 0

    command = COMMANDS.get(argv[0]) if argv else None
    if command is None:
        print(UNKNOWN_COMMAND)
        return 0

    try:
        lines = command(argv[1:], today)
    except SourceUnavailable as exc:
        LOGGER.debug("report aborted: %s", exc.reason)
        print(exc.message)
        return 1
    except InvalidArguments as exc:
        LOGGER.debug("invalid options: %s", exc.detail)
        print(exc.message)
        return 0
    except ReportError as exc:
        print(exc.message)
        return 0

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
