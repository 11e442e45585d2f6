import csv
import io
import json
from datetime import datetime, timezone

import pytest

from backend.core.datacompare import compare_data
from backend.core.datacompare.reporting import (
    CSVFormatter, JSONFormatter, SummaryFormatter, get_formatter
)


@pytest.fixture
async def failed_result():
    return await compare_data(
        {"name": "{{compare:startsWith:Ana}}", "age": 30, "tags": ["a", "b"]},
        {"name": "Bea", "age": 31, "tags": ["a"], "extra": True}
    )


def test_get_formatter():
    assert isinstance(get_formatter("json"), JSONFormatter)
    assert isinstance(get_formatter("csv"), CSVFormatter)
    assert isinstance(get_formatter("summary"), SummaryFormatter)

    with pytest.raises(ValueError, match="desconocido"):
        get_formatter("xml")


async def test_json_formatter(failed_result):
    formatter = JSONFormatter()
    data = json.loads(formatter.format(failed_result))

    assert data["success"] is False
    assert data["stats"]["failedChecks"] == len(failed_result.errors)
    assert formatter.file_extension == ".json"


async def test_json_keeps_non_ascii():
    result = await compare_data({"ciudad": "Málaga"}, {"ciudad": "Málaga"})
    assert "Málaga" in JSONFormatter().format(result)


async def test_csv_formatter(failed_result):
    content = CSVFormatter().format(failed_result)
    rows = list(csv.reader(io.StringIO(content)))

    assert rows[0] == ["ruta", "resultado", "tipo", "mensaje", "valor_esperado", "valor_actual"]
    assert len(rows) == 1 + len(failed_result.errors) + len(failed_result.details)

    by_path = {row[0]: row for row in rows[1:]}
    assert by_path["age"][1:3] == ["ERROR", "VALUE_MISMATCH"]
    assert by_path["age"][4:] == ["30", "31"]
    assert by_path["tags.[0]"][1] == "OK"
    assert by_path["tags"][4:] == ["2", "1"]


async def test_summary_formatter(failed_result):
    summary = SummaryFormatter().format(failed_result)

    assert summary.startswith("Comparación FALLIDA")
    assert "PATTERN_MISMATCH (1)" in summary
    assert "VALUE_MISMATCH (1)" in summary


async def test_summary_formatter_success():
    result = await compare_data({"a": 1}, {"a": 1})
    assert SummaryFormatter().format(result) == "Comparación OK: 1/1 comprobaciones correctas, 0 errores"


async def test_json_renders_non_serializable_values_as_text():
    moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
    result = await compare_data({"t": "2025-01-01"}, {"t": moment})

    data = json.loads(JSONFormatter().format(result))
    assert data["errors"][0]["actual"] == str(moment)
