import pytest

from splinelab.cli import differentiation_report, grid_report, main, spline_report


def test_grid_report_lists_uniform_points():
    lines = grid_report().splitlines()
    index = lines.index("Равномерная сетка:")
    values = lines[index + 1].split()
    assert len(values) == 6
    assert values[0] == "0.050000"
    assert values[-1] == "0.300000"


def test_grid_report_adaptive_steps():
    lines = grid_report().splitlines()
    step_lines = [line for line in lines if line.startswith("h")]
    assert len(step_lines) == 5
    assert step_lines[0].endswith("(отношение: 1.000000)")
    assert all(line.endswith("(отношение: 1.200000)") for line in step_lines[1:])


def test_grid_report_header():
    text = grid_report()
    assert text.splitlines()[0] == "=== Тест генератора сеток ==="
    assert "Отрезок: [0.05, 0.3]" in text
    assert "Адаптивная сетка (r=1.200000):" in text


def test_spline_report_has_three_grids():
    text = spline_report()
    assert text.count("Максимальные погрешности:") == 3
    assert "(сегментов: 24)" in text


def test_spline_report_rows_per_grid():
    lines = spline_report().splitlines()
    rows = [line for line in lines if line.count("\t") == 9 and not line.startswith("x")]
    assert len(rows) == 30
    assert rows[0].startswith("0.060000\t")


def test_spline_report_errors_decrease():
    lines = spline_report().splitlines()
    summaries = [line for line in lines if line.startswith("Функции = ")]
    values = [float(line.split("=")[1].split(",")[0]) for line in summaries]
    assert values[2] < values[0]


def test_differentiation_report_rows():
    lines = differentiation_report().splitlines()
    start = lines.index("-" * 100)
    rows = lines[start + 1:]
    assert len(rows) == 7
    assert rows[0].startswith("0.700\t\t")


def test_differentiation_report_central_error_smallest():
    lines = differentiation_report().splitlines()
    row = lines[lines.index("-" * 100) + 4]
    fields = row.split("\t")
    errors = [float(f) for f in fields[-3:]]
    assert errors[2] < errors[0]
    assert errors[2] < errors[1]


def test_main_prints_all_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Тест генератора сеток ===" in out
    assert "=== Исследование сплайна на вложенных сетках ===" in out
    assert "=== Численное дифференцирование (пункт 4) ===" in out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])