"""Locate and read the CPU temperature through a small configuration file.

The configuration file holds the path of a kernel file that reports the
temperature in millidegrees Celsius. When it is missing, an external helper
script is run to create it.
"""

from __future__ import annotations

import gettext
import re
import subprocess
import sys
from pathlib import Path

_ = gettext.translation("pmcputemp", localedir="/usr/share/locale", fallback=True).gettext

HELPER_SCRIPT = "pmcputemp-sh"
DEFAULT_MAX_TRIES = 10
MIN_MILLIDEGREES = 10000
MAX_MILLIDEGREES = 125000

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class TemperatureError(Exception):
    """The temperature could not be found or is not believable."""


def parse_millidegrees(text: str) -> int:
    """Return the leading integer of *text*, skipping leading whitespace."""
    match = _INTEGER.match(text)
    if match is None:
        raise TemperatureError(_("Failed to read temperature, giving up."))
    return int(match.group(1))


class TemperatureSource:
    """Reads the CPU temperature, creating the configuration on demand."""

    def __init__(self, config_path, module=None, max_tries=DEFAULT_MAX_TRIES):
        self.config_path = Path(config_path)
        self.module = module
        self.max_tries = max_tries
        self.config_created = False

    def make_config(self) -> int:
        """Run the helper script that writes the configuration file.

        Returns the script's exit status.
        """
        self.config_created = True
        command = ["bash", "-c", HELPER_SCRIPT]
        if self.module is not None:
            print(f"load module : {self.module}")
            command.append(self.module)
        try:
            return subprocess.run(command, check=False).returncode
        except OSError:
            return 127

    def _sensor_path(self) -> Path | None:
        """Return the configured sensor path, or None if the file is empty."""
        tokens = self.config_path.read_text(errors="replace").split()
        return Path(tokens[0]) if tokens else None

    def read(self) -> int:
        """Return the CPU temperature in whole degrees Celsius."""
        tries = 0
        while True:
            if tries > self.max_tries:
                raise TemperatureError(_("It seems your processor is unsupported."))
            try:
                sensor = self._sensor_path()
            except FileNotFoundError:
                if self.make_config() != 0:
                    raise TemperatureError(
                        _("Unable to create configuration file.")
                    ) from None
                print(_("An attempt has been made to create a configuration file"))
                tries += 1
                continue
            if sensor is None:
                print(_("File is empty, trying again"), file=sys.stderr)
                tries += 1
                continue
            try:
                text = sensor.read_text(errors="replace")
            except OSError:
                print(
                    _("Can't open configured file, deleting configuration file"),
                    file=sys.stderr,
                )
                self.config_path.unlink(missing_ok=True)
                tries += 1
                continue
            value = parse_millidegrees(text)
            break
        if not MIN_MILLIDEGREES <= value <= MAX_MILLIDEGREES:
            raise TemperatureError(_("Temperature out of range or bad value."))
        return value // 1000