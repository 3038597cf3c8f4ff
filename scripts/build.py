from __future__ import annotations

"""
Build Automation for the I-Series Launcher.

Produces the standalone launcher executable with PyInstaller. The
executable is placed next to the 'runtime' and 'bin' folders of an
installation, which is why it resolves its launch directory from its
own location when frozen.
"""

import os
import platform
import shutil
import sys

import PyInstaller.__main__

EXECUTABLE_NAME = "I-Series"


def _clean_artifacts() -> None:
    """Remove previous PyInstaller output so every build starts clean."""
    for folder in ("build", "dist"):
        if os.path.exists(folder):
            print(f"[*] Cleaning {folder}...")
            shutil.rmtree(folder)

    spec_file = f"{EXECUTABLE_NAME}.spec"
    if os.path.exists(spec_file):
        os.remove(spec_file)


def build(windowed: bool = True) -> None:
    """
    Configure and execute the PyInstaller compilation.

    Args:
        windowed: Build without a console window (the alert dialogs and
                  the log file are the only output channels).
    """
    print("======================================================")
    print(f"Building {EXECUTABLE_NAME} launcher")
    print("======================================================")

    _clean_artifacts()

    sep = ';' if platform.system() == 'Windows' else ':'

    script_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.dirname(script_dir)
    src_dir = os.path.join(project_root, "src")

    main_entry = os.path.join(src_dir, "iseries_launcher", "main.py")
    locales_src = os.path.join(src_dir, "iseries_launcher", "interface", "locales", "*.json")
    locales_dest = os.path.join("iseries_launcher", "interface", "locales")

    args = [
        main_entry,
        f'--name={EXECUTABLE_NAME}',
        '--onefile',
        '--windowed' if windowed else '--console',
        f'--paths={src_dir}',
        '--clean',
        '--collect-all=customtkinter',
        f'--add-data={locales_src}{sep}{locales_dest}',
    ]

    icon_path = os.path.join(project_root, "assets", "icon.ico")
    if os.path.exists(icon_path):
        print(f"[*] Icon found: {icon_path}")
        args.append(f'--icon={icon_path}')

    print("[*] Running PyInstaller with configured paths...")
    try:
        PyInstaller.__main__.run(args)
        print("\n[+] Build Successful! Executable located in 'dist/' folder.")
    except Exception as e:
        print(f"\n[!] CRITICAL BUILD FAILURE: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    build(windowed="--console" not in sys.argv[1:])
