import sys
import argparse
import subprocess
from pathlib import Path


BASE_DIR = Path(__file__).parent.resolve()
DIST_DIR = BASE_DIR / "dist"

EXE_NAME = "tarot-print-prep"


def nuitka_args(debug, package):
    args = [
        sys.executable,
        "-m",
        "nuitka",
        f"{BASE_DIR / 'main.py'}",
        f"--output-filename={EXE_NAME}",
        f"--output-dir={DIST_DIR}",
        "--noinclude-unittest-mode=allow",
        "--noinclude-setuptools-mode=allow",
    ]

    if debug:
        args.append("--include-package=debugpy")

    if package:
        args.extend(["--onefile", "--standalone"])
    else:
        args.extend(["--follow-imports"])

    return args


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build a standalone tarot-print-prep executable, run from project root"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Whether to build debug exe."
    )
    parser.add_argument(
        "--package",
        action="store_true",
        help="Whether to build a single exe or a folder with dependencies.",
    )
    args = parser.parse_args(argv)

    subprocess.check_call(nuitka_args(args.debug, args.package))

    print(f"exe successfully built in {DIST_DIR}")


if __name__ == "__main__":
    main()
