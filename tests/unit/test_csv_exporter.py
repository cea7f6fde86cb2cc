import csv

from quantum_console.app.export.csv_exporter import export_rows, resolve_headers


def _data_lines(path) -> list[str]:
    return [line for line in path.read_text(encoding="utf-8-sig").splitlines() if not line.startswith("#")]


def test_csv_exporter_creates_valid_csv(tmp_path) -> None:
    out_dir = tmp_path / "exports"
    rows = [{"id": 1, "name": "Mic", "price": 19.9}]

    path = export_rows(module="products", rows=rows, output_dir=str(out_dir), filters={"search": "mic"})

    assert path.exists()
    assert path.name.startswith("products_")
    content = path.read_text(encoding="utf-8-sig")
    assert "# module: products" in content
    assert "# rows: 1" in content
    assert "'search': 'mic'" in content
    assert _data_lines(path) == ["id,name,price", "1,Mic,19.90"]


def test_csv_exporter_serializes_nested_values_and_blanks_secrets(tmp_path) -> None:
    rows = [
        {"id": 7, "user": {"name": "Dee"}, "hashed_password": "$2b$secret", "comment": None},
    ]

    path = export_rows(module="reviews", rows=rows, output_dir=str(tmp_path))

    reader = csv.DictReader(_data_lines(path))
    record = next(reader)
    assert record["user"] == '{"name": "Dee"}'
    assert record["hashed_password"] == ""
    assert record["comment"] == ""


def test_explicit_headers_win_over_row_keys() -> None:
    assert resolve_headers([{"a": 1, "b": 2}], ["b"]) == ["b"]
    assert resolve_headers([{"a": 1, "b": 2}]) == ["a", "b"]
    assert resolve_headers([]) == []
