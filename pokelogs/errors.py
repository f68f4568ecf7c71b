"""
Report Errors

Every error a report can end with carries a user-facing message (Spanish,
like the rest of the CLI output). Front ends render ``message`` and nothing
else.
"""

from typing import Iterable


class ReportError(Exception):
    """Base class for errors that abort a single report"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDate(ReportError):
    """A caller-supplied date does not match DD/MM/YYYY"""

    def __init__(self, boundary: str, value: str, example: str = "02/09/2023"):
        label = "inicio" if boundary == "start" else "fin"
        super().__init__(
            f"Fecha {label} inválida tiene que ser de la forma ({example})"
        )
        self.boundary = boundary
        self.value = value


class InvalidRange(ReportError):
    def __init__(self):
        super().__init__("La fecha inicio es después de la fecha fin")


class InvalidPeriod(ReportError):
    def __init__(self, days: int, maximum: int = 3660):
        super().__init__(f"El número de días tiene que estar entre 1 y {maximum}")
        self.days = days


class MissingModule(ReportError):
    def __init__(self, known: Iterable[str]):
        super().__init__(
            "Módulo no ingresado. Módulos disponibles: " + ", ".join(known)
        )


class UnknownModule(ReportError):
    def __init__(self, name: str, known: Iterable[str]):
        super().__init__(
            "Módulo no existe, tiene que ser uno de los siguientes "
            + ", ".join(known)
        )
        self.name = name


class SourceUnavailable(ReportError):
    """The log file could not be opened or read; fatal for the invocation"""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"No se pudo leer el archivo de logs {path}")
        self.path = path
        self.reason = reason


class InvalidArguments(ReportError):
    """Command options that could not be parsed"""

    def __init__(self, detail: str):
        super().__init__("Opciones inválidas para el comando, revisa --help")
        self.detail = detail
