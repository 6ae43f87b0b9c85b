"""Read, convert and write notebook exports one path at a time."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal, Optional

from .formats.markdown import to_markdown
from .models import ConversionOptions
from .naming import get_naming_strategy
from .parser import parse_notebook

ConversionStatus = Literal["success", "unsupported", "error"]


class ConversionError(Exception):
    """Raised when a single notebook cannot be converted."""


class UnsupportedFileTypeError(ConversionError):
    """Raised when the input does not carry the expected source extension."""


class MissingFileError(ConversionError):
    """Raised when the input path does not exist."""


@dataclass(slots=True)
class ConversionResult:
    """Per-path conversion record used for status reporting."""

    source: Path
    status: ConversionStatus
    output: Optional[Path] = None
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        """Return True when the output file was written."""

        return self.status == "success"

    @property
    def status_line(self) -> str:
        """Return the one-line, human-readable outcome for this path."""

        if self.status == "success" and self.output is not None:
            return f"✅ {self.output.name}"
        if self.status == "unsupported":
            return f'🙁 "{self.source.name}" is not a supported filetype'
        return f"🚨 {self.source.name}: {self.message}"


def output_path_for(path: str, options: ConversionOptions) -> Path:
    """Return the destination path chosen by the active naming strategy."""

    strategy = get_naming_strategy(options.naming_strategy)
    return Path(strategy(path, options.extension))


def _convert(path: str, options: ConversionOptions) -> Path:
    source = Path(path)
    if source.suffix != options.source_extension:
        raise UnsupportedFileTypeError(f"{source.name} is not supported")
    if not source.is_file():
        raise MissingFileError("File does not exist")

    html = source.read_text(encoding="utf-8")
    notebook = parse_notebook(html, options.parse)
    output = output_path_for(path, options)
    output.write_text(to_markdown(notebook), encoding="utf-8")
    return output


def convert_notebook(
    path: str, options: Optional[ConversionOptions] = None
) -> ConversionResult:
    """Convert one notebook export, reporting failures in the result."""

    resolved = options or ConversionOptions()
    source = Path(path)
    try:
        output = _convert(path, resolved)
    except UnsupportedFileTypeError as exc:
        return ConversionResult(
            source=source, status="unsupported", message=str(exc)
        )
    except (ConversionError, OSError, UnicodeDecodeError) as exc:
        return ConversionResult(source=source, status="error", message=str(exc))
    return ConversionResult(source=source, status="success", output=output)


def process_paths(
    paths: Iterable[str],
    options: Optional[ConversionOptions] = None,
    *,
    verbose: bool = True,
) -> list[ConversionResult]:
    """Convert every path independently and print one status line each."""

    resolved = options or ConversionOptions()
    results: list[ConversionResult] = []
    for path in paths:
        result = convert_notebook(path, resolved)
        if verbose:
            print(result.status_line)
        results.append(result)
    return results
