"""Line-based terminal prompts for choosing options, keys and files."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

PROGRAM_TITLE = "🔐 Practica de cifrado AES con modos de operación"
BMP_SUFFIX = ".bmp"

_MARGIN = "    "
_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_CYAN_BACKGROUND = "\x1b[46m"
_ERROR_COLOUR = "\x1b[91m"
_QUIT_WORDS = frozenset({"q", "esc"})


def _ask(prompt: str) -> str | None:
    """Read one line, or return None when input ends or is interrupted."""
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def _margin(text: str) -> str:
    return textwrap.indent(text, _MARGIN, lambda line: True)


def render_title() -> str:
    """Return the program banner: the title underlined, followed by a blank line."""
    marker = f"{_CYAN_BACKGROUND}  {_RESET}"
    heading = f"{marker} {_BOLD}{PROGRAM_TITLE}{_RESET}"
    underline = "─" * (len(PROGRAM_TITLE) + 3)
    return f"{_MARGIN}{heading}\n{_MARGIN}{underline}\n\n"


def _choose(items: list[str], answer: str) -> int | None:
    """Map an answer (1-based number or exact item text) to an index."""
    if answer.isdigit() and 1 <= int(answer) <= len(items):
        return int(answer) - 1
    if answer in items:
        return items.index(answer)
    return None


def get_option(title: str, options: list[str]) -> tuple[bool, int]:
    """Let the user pick one of ``options``.

    Returns whether a choice was made and its index. An empty answer picks
    the first option; ``q``, ``esc`` or end of input cancel.
    """
    items = list(options)
    if not items:
        raise ValueError("there are no options to choose from")
    print("\n" + render_title(), end="")
    print(f"  {title}")
    for number, option in enumerate(items, 1):
        print(f"{_MARGIN}{number}. {option}")
    while True:
        answer = _ask("> ")
        if answer is None:
            return False, 0
        answer = answer.strip()
        if answer.lower() in _QUIT_WORDS:
            return False, 0
        if not answer:
            return True, 0
        index = _choose(items, answer)
        if index is not None:
            return True, index
        print(f"{_MARGIN}{answer} is not valid.")


def get_key(limit: int, placeholder: str, description: str) -> tuple[bool, str]:
    """Read a value of exactly ``limit`` characters.

    Longer input is cut to ``limit`` characters; shorter input is asked for
    again. End of input cancels and returns ``(False, "")``.
    """
    print("\n" + render_title(), end="")
    print(_margin(f"{description}\n\n[{placeholder}]\n\n(Ctrl-D to quit)"))
    while True:
        answer = _ask("> ")
        if answer is None:
            return False, ""
        value = answer[:limit]
        if len(value) < limit:
            print(f"{_MARGIN}{limit} characters are required, got {len(value)}")
            continue
        return True, value


def _bmp_files(directory: Path) -> list[Path]:
    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file()
        and entry.suffix == BMP_SUFFIX
        and not entry.name.startswith(".")
    )


def get_file(directory: str | Path) -> tuple[bool, str]:
    """Let the user pick a BMP file from ``directory``, creating it if missing.

    Returns whether a file was chosen and its path.
    """
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    files = _bmp_files(folder)
    print("\n" + render_title(), end="")
    if not files:
        print(_margin(f"No {BMP_SUFFIX} files in {folder}"))
        return False, ""
    print(_margin("Selecciona el archivo:"))
    print()
    for number, entry in enumerate(files, 1):
        print(f"{_MARGIN}{number}. {entry.name}")
    names = [entry.name for entry in files]
    while True:
        answer = _ask("> ")
        if answer is None:
            return False, ""
        answer = answer.strip()
        if answer.lower() in _QUIT_WORDS or not answer:
            return False, ""
        index = _choose(names, answer)
        if index is not None:
            chosen = str(files[index])
            print(_margin(f"Archivo seleccionado: {chosen}"))
            return True, chosen
        print(f"{_MARGIN}{answer} is not valid.")


def show_message(message: str, error: bool) -> None:
    """Print ``message`` under the banner, highlighted when it reports an error."""
    text = f"{_ERROR_COLOUR}{message}{_RESET}" if error else message
    print("\n" + render_title() + _margin(text) + "\n")