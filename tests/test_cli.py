import pytest

from pokelogs import cli

from conftest import TODAY


@pytest.fixture
def log_file(write_log):
    return str(
        write_log(
            "PokeAPI (success,120ms,09/03/2024)",
            "PokeAPI (fail,80ms,09/03/2024)",
            "PokeAPI (success,30ms,10/03/2024)",
            "unrelated line",
        )
    )


def run(capsys, *argv):
    code = cli.main(list(argv), today=TODAY)
    return code, capsys.readouterr().out.splitlines()


def test_check_latency(capsys, log_file):
    code, out = run(
        capsys, "CheckLatency", "PokeAPI", "-s", "08/03/2024", "--end", "10/03/2024",
        "--log-file", log_file,
    )
    assert code == 0
    assert out == [
        "08/03/2024 desconocido",
        "09/03/2024 100.00ms",
        "10/03/2024 30.00ms",
    ]


def test_check_availability_last_three_days(capsys, log_file):
    code, out = run(capsys, "CheckAvailability", "PokeAPI", "--Last3Days", "--log-file", log_file)
    assert code == 0
    assert out == ["08/03/2024 desconocido", "09/03/2024 50", "10/03/2024 100"]


def test_check_availability_explicit_days(capsys, log_file):
    code, out = run(capsys, "CheckAvailability", "PokeAPI", "-N", "2", "--log-file", log_file)
    assert out == ["09/03/2024 50", "10/03/2024 100"]


def test_render_graph(capsys, log_file, monkeypatch):
    build = cli._service

    def service_with_fake_plotter(args, today):
        service = build(args, today)
        service.plotter = lambda values, height: "CHART"
        return service

    monkeypatch.setattr(cli, "_service", service_with_fake_plotter)
    code, out = run(capsys, "RenderGraph", "PokeAPI", "-N", "2", "-L", "--log-file", log_file)
    assert code == 0
    assert out[0] == "CHART"
    assert out[-3:] == ["             09/ 10/", "             03/ 03/", "             24  24"]


def test_unknown_command(capsys):
    code, out = run(capsys, "CheckEverything")
    assert code == 0
    assert out == [cli.UNKNOWN_COMMAND]
    assert run(capsys)[1] == [cli.UNKNOWN_COMMAND]


def test_unknown_and_missing_module(capsys, log_file):
    _, out = run(capsys, "CheckLatency", "Unknown", "--log-file", log_file)
    assert out == ["Módulo no existe, tiene que ser uno de los siguientes PokeAPI, PokeImages, PokeStats"]

    _, out = run(capsys, "CheckAvailability", "--log-file", log_file)
    assert out == ["Módulo no ingresado. Módulos disponibles: PokeAPI, PokeImages, PokeStats"]


def test_invalid_dates(capsys, log_file):
    _, out = run(capsys, "CheckLatency", "PokeAPI", "-s", "10/03/2024", "-e", "01/03/2024", "--log-file", log_file)
    assert out == ["La fecha inicio es después de la fecha fin"]

    _, out = run(capsys, "CheckLatency", "PokeAPI", "-s", "2024-03-01", "--log-file", log_file)
    assert out == ["Fecha inicio inválida tiene que ser de la forma (02/09/2023)"]


def test_missing_log_file_exits_non_zero(capsys, tmp_path):
    missing = str(tmp_path / "nope.txt")
    code, out = run(capsys, "CheckAvailability", "PokeAPI", "--log-file", missing)
    assert code == 1
    assert out == [f"No se pudo leer el archivo de logs {missing}"]


def test_help_shows_default_dates(capsys):
    code, out = run(capsys, "CheckLatency", "--help")
    text = "\n".join(out)
    assert code == 0
    assert "valor default: 04/03/2024" in text
    assert "valor default: 10/03/2024" in text


def test_huge_period_prints_message(capsys, log_file):
    code, out = run(capsys, "CheckAvailability", "PokeAPI", "-N", "1000000", "--log-file", log_file)
    assert code == 0
    assert out == ["El número de días tiene que estar entre 1 y 3660"]


def test_bad_option_value_prints_message(capsys, log_file):
    code, out = run(capsys, "CheckAvailability", "PokeAPI", "-N", "abc", "--log-file", log_file)
    assert code == 0
    assert out == ["Opciones inválidas para el comando, revisa --help"]


def test_options_of_other_commands_are_ignored(capsys, log_file):
    code, out = run(
        capsys, "CheckLatency", "PokeAPI", "--Last3Days",
        "-s", "09/03/2024", "-e", "09/03/2024", "--log-file", log_file,
    )
    assert code == 0
    assert out == ["09/03/2024 100.00ms"]
