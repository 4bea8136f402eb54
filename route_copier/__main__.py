"""Package entry point for ``python -m route_copier``.

WHY: Users run the extractor as ``python -m route_copier page.html`` for
CLI mode, or ``python -m route_copier --gui`` for the desktop window with
the copy button.

HOW: Checks sys.argv for the ``--gui`` flag. If present, launches the
Tkinter GUI. Otherwise, delegates to the CLI's main() function.

RULES:
- ``--gui`` flag launches the Tkinter GUI
- Without ``--gui``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--gui" in sys.argv:
        from route_copier.gui import main as gui_main
        gui_main()
    else:
        from route_copier.cli import main
        main()
