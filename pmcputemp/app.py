"""Command line handling and the small always-on-top temperature window."""

from __future__ import annotations

import gettext
import os
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from pmcputemp.about import _about_window, show_about
from pmcputemp.cpuinfo import PRG, build_tooltip
from pmcputemp.icon import Style, render_icon
from pmcputemp.sensors import _sensor_window, read_sensors
from pmcputemp.temperature import TemperatureError, TemperatureSource

_ = gettext.translation("pmcputemp", localedir="/usr/share/locale", fallback=True).gettext

ICON = "temp.png"
CONFDIR = "pmcputemp"
CONF = "pmcputemprc"
DEFAULT_INTERVAL = 5000
MAX_ARGS = 3
HELP_COMMAND = ["mdview", "/usr/share/pmcputemp", "", "", "pmcputemp help"]


@dataclass
class Options:
    """Settings taken from the command line."""

    style: Style = Style.DEFAULT
    interval: int = DEFAULT_INTERVAL
    module: str | None = None


def _seconds(arg: str) -> int:
    return int(arg) if len(arg) == 1 and "0" <= arg <= "9" else 0


def parse_args(argv=None) -> Options:
    """Read the style ('d' or 'l'), interval (1-9 seconds) and kernel module."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = Options()
    if len(args) > MAX_ARGS:
        print("Too many arguments, loading defaults", file=sys.stderr)
        return options
    for arg in args:
        first = arg[:1]
        if first == "d":
            options.style = Style.DARK
        elif first == "l":
            options.style = Style.LIGHT
        elif len(arg) > 1:
            if options.module is not None:
                print(
                    f"kernel module {options.module} is already specified",
                    file=sys.stderr,
                )
            else:
                options.module = arg
        else:
            seconds = _seconds(arg)
            if not 1 <= seconds <= 10:
                print(
                    _("Polling interval out of range. Use 1 to 10\n"
                      "Using default 5 seconds"),
                    file=sys.stderr,
                )
                seconds = 5
            options.interval = seconds * 1000
    return options


def _cache_dir() -> Path:
    return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")


def _runtime_dir() -> Path:
    runtime = os.environ.get("XDG_RUNTIME_DIR")
    return Path(runtime) if runtime else _cache_dir()


def _config_dir() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def _open_help() -> None:
    try:
        subprocess.Popen(HELP_COMMAND)
    except OSError:
        print("Failed to open help file", file=sys.stderr)


class _Tray:
    """A small window that shows the icon, a tooltip and a right-click menu."""

    def __init__(self, root, source, options, icon_path):
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.source = source
        self.options = options
        self.icon_path = icon_path
        self.error: TemperatureError | None = None
        self._settled = False
        self._photo = None
        self._tooltip = ""
        self._tip = None

        root.title(PRG)
        root.resizable(False, False)
        self.label = tk.Label(root, borderwidth=0)
        self.label.pack()
        self.label.bind("<Enter>", self._show_tip)
        self.label.bind("<Leave>", self._hide_tip)
        self.label.bind("<Button-3>", self._popup)
        self.menu = self._build_menu()

    def _build_menu(self):
        menu = self._tk.Menu(self.root, tearoff=0)
        menu.add_command(label=_("Help"), command=_open_help)
        menu.add_command(
            label=_("Info"), command=lambda: _sensor_window(self.root, read_sensors())
        )
        menu.add_command(label=_("About"), command=lambda: _about_window(self.root))
        menu.add_command(label=_("Quit"), command=self.root.destroy)
        return menu

    def _popup(self, event) -> None:
        try:
            self.menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.menu.grab_release()

    def _show_tip(self, event) -> None:
        self._hide_tip()
        if not self._tooltip:
            return
        tip = self._tk.Toplevel(self.root)
        tip.overrideredirect(True)
        tip.geometry(f"+{event.x_root + 12}+{event.y_root + 12}")
        self._tk.Label(
            tip, text=self._tooltip, justify="left", relief="solid", borderwidth=1
        ).pack()
        self._tip = tip

    def _hide_tip(self, event=None) -> None:
        if self._tip is not None:
            self._tip.destroy()
            self._tip = None

    def update(self) -> None:
        """Read the temperature, redraw the icon and schedule the next update."""
        from PIL import ImageTk

        try:
            temp = self.source.read()
        except TemperatureError as exc:
            self.error = exc
            self.root.destroy()
            return
        if self.source.config_created and not self._settled:
            time.sleep(1)
            self._settled = True
        image = render_icon(temp, self.options.style, self.icon_path)
        self._photo = ImageTk.PhotoImage(image, master=self.root)
        self.label.configure(image=self._photo)
        try:
            self._tooltip = build_tooltip(with_version=False)
        except OSError:
            pass
        self.root.after(self.options.interval, self.update)


def _fail(error: TemperatureError) -> int:
    print(error, file=sys.stderr)
    try:
        show_about(False)
    except Exception:  # no display or no Tk available
        print("It seems your processor is unsupported. Exiting")
    return 1


def main(argv=None) -> int:
    """Start the temperature monitor; returns the exit status."""
    options = parse_args(argv)
    icon_path = _runtime_dir() / ICON
    config_dir = _config_dir() / CONFDIR
    config_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    source = TemperatureSource(config_dir / CONF, options.module)

    try:
        render_icon(source.read(), options.style, icon_path)
    except TemperatureError as exc:
        return _fail(exc)

    import tkinter as tk

    root = tk.Tk()
    tray = _Tray(root, source, options, icon_path)
    tray.update()
    if tray.error is None:
        root.mainloop()
    if tray.error is not None:
        return _fail(tray.error)
    return 0