"""Fetch the multicodec table and render it as Go constants."""

import csv
import dataclasses
import io
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

import requests
import rich.console

from codetable.errors import NetworkError, ParseError, RenderError
from codetable.utils.tableentry import TableEntry

from .consts import (
    DEPRECATED_PREFIX,
    DESCRIPTION_SUFFIX_TEMPLATE,
    ENTRY_TEMPLATE,
    FETCH_TIMEOUT,
    MIN_FIELDS,
    OUTPUT_PATH,
    PACKAGE_NAME,
    POSTAMBLE,
    PREAMBLE_TEMPLATE,
    TABLE_URL,
)


@dataclasses.dataclass(frozen=True, kw_only=True)
class GeneratorConfig:
    """Where to read the table from and where to write the generated code."""

    url: str = TABLE_URL
    output: Path = OUTPUT_PATH
    package: str = PACKAGE_NAME


def fetch(url: str) -> io.StringIO:
    """Download the CSV table at `url`.

    One blocking request. Redirects are left to `requests`' defaults.
    """
    try:
        resp = requests.get(url, timeout=FETCH_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as ex:
        raise NetworkError(f"failed to fetch {url}: {ex}") from ex

    return io.StringIO(resp.text, newline="")


def parse(lines: Iterable[str]) -> Iterator[TableEntry]:
    """Lazily parse CSV `lines` into table entries, skipping the header row.

    Fields are stripped of surrounding whitespace. Blank lines are ignored.
    Raises on the first row that is not valid CSV, such as a stray quote in a
    quoted field, or that has too few fields.
    """
    reader = csv.reader(lines, strict=True)
    try:
        next(reader, None)
        for row in reader:
            if not row:
                continue
            if len(row) < MIN_FIELDS:
                raise ParseError(
                    reader.line_num,
                    f"expected at least {MIN_FIELDS} fields, got {len(row)}",
                )

            name, tag, code, status, description = (
                field.strip() for field in row[:MIN_FIELDS]
            )
            yield TableEntry(
                name=name, tag=tag, code=code, status=status, description=description
            )
    except csv.Error as ex:
        raise ParseError(reader.line_num, str(ex)) from ex


def render_entry(entry: TableEntry) -> str:
    """Render the doc comment and constant declaration for one entry."""
    try:
        return ENTRY_TEMPLATE.format(
            deprecated_prefix=DEPRECATED_PREFIX if entry.is_deprecated else "",
            var_name=entry.var_name,
            status=entry.status,
            tag=entry.tag,
            description_suffix=(
                DESCRIPTION_SUFFIX_TEMPLATE.format(description=entry.description)
                if entry.description
                else ""
            ),
            code=entry.code,
            name=entry.name,
        )
    except (KeyError, IndexError, ValueError) as ex:
        raise RenderError(f"failed to render {entry.name!r}: {ex}") from ex


def render(entries: Sequence[TableEntry], package: str = PACKAGE_NAME) -> str:
    """Render the whole generated Go file, preserving the order of `entries`."""
    return "".join(
        [
            PREAMBLE_TEMPLATE.format(package=package),
            *(render_entry(entry) for entry in entries),
            POSTAMBLE,
        ]
    )


def write(path: Path, document: str) -> None:
    """Create or truncate `path` and write `document` to it."""
    with open(path, "w", encoding="utf-8", newline="\n") as fil:
        fil.write(document)


def main(config: GeneratorConfig, console: rich.console.Console) -> list[TableEntry]:
    """Regenerate the Go code table.

    Every stage completes before the next begins. The destination is only
    opened once the document is fully rendered, so a bad table leaves any
    existing output untouched.
    """
    with console.status(f"[bold green]Fetching {config.url}"):
        stream = fetch(config.url)

    entries = list(parse(stream))
    document = render(entries, config.package)
    write(config.output, document)

    console.print(
        f"Wrote {len(entries)} codes to {config.output}", highlight=False, markup=False
    )
    return entries
