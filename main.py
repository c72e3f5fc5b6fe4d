#!/usr/bin/env python3
"""
Sweep Rename - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter, requires PySide6)

Usage:
    python main.py -p ./dir -s _draft -d -v        # Preview removing "_draft"
    python main.py -p ./dir -s IMG --replace photo # Replace "IMG" with "photo"
    python main.py --gui                           # GUI mode
"""

import sys


def main():
    """Main entry point"""
    if "--gui" in sys.argv:
        try:
            from sweep_gui import main as gui_main
        except ImportError as e:
            print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
            print(f"Detailed error: {e}")
            print("\nInstall command: pip install sweep-rename[gui]")
            return 1
        return gui_main()

    from sweep_cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
