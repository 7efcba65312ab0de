"""Collect strings marked for localisation from a project's source files."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

SOURCE_EXTENSIONS = frozenset({".hpp", ".h", ".c", ".cpp", ".cxx"})
TEXT_PATTERN = re.compile(r'Text\((?:u8|u16|u32|u|U|L)?"(.*?)"\)')
DEFAULT_LOCALE = "EN-US"
OUTPUT_FILE = "./Out.txt"
_HELP_FLAGS = frozenset({"-h", "-help", "--h", "--help"})
_LOCALE_FLAG = "--locale="


def _collect(directory: Path) -> Iterator[Path]:
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            yield from _collect(entry)
        elif entry.suffix in SOURCE_EXTENSIONS:
            yield entry


def get_source_files(root: str | Path) -> list[Path]:
    """Return every C/C++ source file below ``root/Source``.

    Prints an error and returns an empty list if that directory is missing.
    """
    source_dir = Path(root) / "Source"
    if not source_dir.exists():
        print(
            f'[Localize] [Error] Project source directory "{source_dir}" does not exist',
            file=sys.stderr,
        )
        return []
    return list(_collect(source_dir))


def extract_texts(files: Iterable[str | Path]) -> Iterator[str]:
    """Yield the contents of each ``Text("...")`` literal, file by file."""
    for file in files:
        try:
            data = Path(file).read_text(encoding="utf-8", errors="replace")
        except OSError:
            print(f"[Warning] Could not open file: {file}", file=sys.stderr)
            continue
        for match in TEXT_PATTERN.finditer(data):
            yield match.group(1)


def extract_and_write_texts(
    locale: str, files: Iterable[str | Path], output_file: str | Path
) -> None:
    """Write a locale header followed by one extracted text per line."""
    with open(output_file, "w", encoding="utf-8") as out:
        out.write(f"Locale: {locale}\n")
        for text in extract_texts(files):
            out.write(text + "\n")
    print(f"[Info] Extracted texts written to: {output_file}")


def usage(desc: bool = False) -> str:
    lines = [
        "[Localize] [Usage] ./localize <project_root_dir> [OPTIONAL]...",
        "  Options: ",
        "   <project_root_dir> : Directory containing ./Source.",
        "   --get-text         : Read source files and find text to be localized.",
        "   --locale=        : Specify the locale of strings read from the program.",
    ]
    if desc:
        lines += [
            "  Description:",
            "   1: Get text from the program to be localized in a string database",
        ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(usage(True))
        return 2

    root = Path(args[0])
    if not root.exists():
        print(
            f'[Localize] [Error] Project root directory "{args[0]}" does not exist',
            file=sys.stderr,
        )
        return 1

    get_text = False
    locale = DEFAULT_LOCALE
    for arg in (a.lower() for a in args[1:]):
        if arg in _HELP_FLAGS:
            sys.stderr.write(usage(True))
            return 2
        if arg == "--get-text":
            get_text = True
        if arg.startswith(_LOCALE_FLAG):
            locale = arg[len(_LOCALE_FLAG):]

    if get_text:
        files = get_source_files(root)
        if not files:
            print("[localize] [Error] No source files found", file=sys.stderr)
            return 1
        try:
            extract_and_write_texts(locale, files, OUTPUT_FILE)
        except OSError as exc:
            print(f"[Error] Failed to open output file: {OUTPUT_FILE} ({exc})", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())