"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_correlated"
title = "Correlated logging facade with caller inference and structured outcomes"
version = "1.0.0"
author = "bitranox"
shell_command = "lib_log_correlated"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner, one ``key = value`` line per field.

    Parameters
    ----------
    writer:
        Receives each line including its trailing newline; defaults to
        :func:`print` without an extra newline.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["print_info"]
