"""Output of the lm_sensors 'sensors' command and a window to show it."""

from __future__ import annotations

import gettext
import subprocess
import sys

_ = gettext.translation("pmcputemp", localedir="/usr/share/locale", fallback=True).gettext

NO_DATA = "No data"
BUFFER_SIZE = 1024
SENSORS_COMMAND = ("sensors",)


def read_sensors(command=SENSORS_COMMAND) -> str:
    """Run *command* and return at most BUFFER_SIZE bytes of its output.

    Returns NO_DATA when the command cannot be run or prints nothing.
    """
    try:
        result = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return NO_DATA
    data = result.stdout
    if len(data) >= BUFFER_SIZE:
        print("Too big to read", file=sys.stderr)
    data = data[:BUFFER_SIZE]
    if not data:
        return NO_DATA
    return data.decode(errors="replace")


def _sensor_window(master, text):
    """Open a window belonging to *master* that shows *text*."""
    import tkinter as tk

    window = tk.Toplevel(master)
    window.title(_("Sensors"))
    window.minsize(450, 150)
    frame = tk.Frame(window, padx=10, pady=10)
    frame.pack(fill="both", expand=True)
    heading = tk.Label(
        frame, text=_("Output from lm_sensors"), font=("Sans", 12), wraplength=430
    )
    heading.pack(fill="both", expand=True, pady=5)
    body = tk.Label(frame, text=text, font=("Monospace", 10), justify="left")
    body.pack(fill="both", expand=True, pady=5)
    return window


def sensor_gui() -> None:
    """Show the sensors output in a window and wait until it is closed."""
    import tkinter as tk

    text = read_sensors()
    root = tk.Tk()
    root.withdraw()
    window = _sensor_window(root, text)
    window.protocol("WM_DELETE_WINDOW", root.destroy)
    root.mainloop()