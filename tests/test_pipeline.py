from __future__ import annotations

from pathlib import Path

from notebook_export import ConversionOptions, convert_notebook, process_paths


def test_convert_writes_sanitized_markdown(tmp_path, notebook_html):
    source = tmp_path / "Republic - Notebook.html"
    source.write_text(notebook_html, encoding="utf-8")

    result = convert_notebook(str(source))

    assert result.success
    assert result.output == tmp_path / "Republic.md"
    content = result.output.read_text(encoding="utf-8")
    assert content.startswith("# Republic, by Plato and Benjamin Jowett\n\n")
    assert result.status_line == "✅ Republic.md"


def test_convert_preserve_txt(tmp_path, notebook_html):
    source = tmp_path / "Republic - Notebook.html"
    source.write_text(notebook_html, encoding="utf-8")
    options = ConversionOptions(extension=".txt", naming_strategy="preserve")

    result = convert_notebook(str(source), options)

    assert result.output == tmp_path / "Republic - Notebook.txt"
    assert result.output.exists()


def test_unsupported_type_is_rejected_before_io(tmp_path):
    source = tmp_path / "Book.txt"

    result = convert_notebook(str(source))

    assert result.status == "unsupported"
    assert result.status_line == '🙁 "Book.txt" is not a supported filetype'
    assert not (tmp_path / "Book.md").exists()


def test_missing_file_is_reported(tmp_path):
    result = convert_notebook(str(tmp_path / "Gone.html"))

    assert result.status == "error"
    assert result.message == "File does not exist"
    assert result.status_line == "🚨 Gone.html: File does not exist"


def test_write_failure_is_reported(tmp_path, notebook_html):
    source = tmp_path / "Book.html"
    source.write_text(notebook_html, encoding="utf-8")
    (tmp_path / "Book.md").mkdir()

    result = convert_notebook(str(source))

    assert result.status == "error"
    assert result.status_line.startswith("🚨 Book.html: ")


def test_process_paths_isolates_failures(tmp_path, notebook_html, capsys):
    good = tmp_path / "Good - Notebook.html"
    good.write_text(notebook_html, encoding="utf-8")
    paths = [
        str(tmp_path / "notes.txt"),
        str(tmp_path / "Missing.html"),
        str(good),
    ]

    results = process_paths(paths)

    assert [r.status for r in results] == ["unsupported", "error", "success"]
    assert Path(tmp_path / "Good.md").exists()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        '🙁 "notes.txt" is not a supported filetype',
        "🚨 Missing.html: File does not exist",
        "✅ Good.md",
    ]


def test_process_paths_quiet(tmp_path, capsys):
    process_paths([str(tmp_path / "a.pdf")], verbose=False)
    assert capsys.readouterr().out == ""


def test_undecodable_file_is_reported(tmp_path):
    source = tmp_path / "Book.html"
    source.write_bytes(b"\xff\xfe<html>")

    result = convert_notebook(str(source))

    assert result.status == "error"
    assert result.status_line.startswith("🚨 Book.html: ")
    assert not (tmp_path / "Book.md").exists()
