"""Wrappers around nm and objdump that report files without symbols."""

from __future__ import annotations

import subprocess
import sys
from typing import Iterable


def _prog(default: str) -> str:
    return sys.argv[0] if sys.argv and sys.argv[0] else default


def filter_output(
    lines: Iterable[str], program: str, target: str
) -> tuple[list[str], list[str]]:
    """Separate a tool's output into lines to show and diagnostics.

    Every line mentioning "no symbols" becomes the diagnostic
    ``program: target: no symbols``; all other lines are kept unchanged.
    """
    kept: list[str] = []
    diagnostics: list[str] = []
    for line in lines:
        if "no symbols" in line:
            diagnostics.append(f"{program}: {target}: no symbols\n")
        else:
            kept.append(line)
    return kept, diagnostics


def run_filtered(command: list[str], program: str, target: str) -> bool:
    """Run ``command``, echo its filtered output and return whether it had no symbols.

    Raises OSError if the command cannot be started.
    """
    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    ) as process:
        assert process.stdout is not None
        kept, diagnostics = filter_output(process.stdout, program, target)
    sys.stdout.write("".join(kept))
    sys.stdout.flush()
    sys.stderr.write("".join(diagnostics))
    sys.stderr.flush()
    return bool(diagnostics)


def nm_main(argv: list[str] | None = None) -> int:
    """List the symbols of one object file with ``nm -p``."""
    if argv is None:
        argv = sys.argv[1:]
    program = _prog("hnm")
    if len(argv) != 1:
        print(f"Usage: {program} [object_file]", file=sys.stderr)
        return 1
    target = argv[0]
    try:
        missing = run_filtered(["nm", "-p", target], program, target)
    except OSError:
        print("Error: failed to execute nm command.", file=sys.stderr)
        return 1
    return 1 if missing else 0


def objdump_main(argv: list[str] | None = None) -> int:
    """Show file headers and section contents of each file with ``objdump -sf``.

    The exit status reflects only the last file processed.
    """
    if argv is None:
        argv = sys.argv[1:]
    program = _prog("hobjdump")
    if not argv:
        print(f"Usage: {program} [objfile", file=sys.stderr)
        return 1
    missing = False
    for target in argv:
        try:
            missing = run_filtered(["objdump", "-sf", target], program, target)
        except OSError:
            print("Error: failed to excute objdump command.", file=sys.stderr)
            return 1
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(nm_main())