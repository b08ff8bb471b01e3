# pmcputemp

A small CPU temperature monitor for Linux desktops. It reads the CPU
temperature from the file named in its configuration and draws a 24×24 icon
that shows the temperature in degrees Celsius. The icon's colour follows the
temperature. It shows the icon in a small window. Hold the pointer over the
icon to see a tooltip. Right-click it for a menu.

The window uses Tkinter, so Python must have Tk support. Pillow must also be
built with its Tk support (`PIL.ImageTk`).

## Installation

```
pip install .
```

## Usage

```
pmcputemp [INTERVAL] [d|l] [MODULE]
```

It takes at most three arguments, in any order:

- `INTERVAL`: the polling interval in seconds, a single digit from 1 to 9.
  `0` or any other single character is out of range. The program prints a
  warning and uses the default of 5 seconds.
- An argument that starts with `d` or `l` picks a dark or a light icon in
  place of the default temperature-coloured one. Above 80 °C the icon turns
  red whatever the style.
- `MODULE`: any other argument longer than one character. It is taken as the
  name of a kernel module and passed to the setup helper when the
  configuration is created. Only the first one counts. Later ones are
  reported and ignored.

If you give more than three arguments, all of them are ignored and the
defaults are used.

Examples:

```
pmcputemp            # default style, update every 5 seconds
pmcputemp 2 d        # dark icon, update every 2 seconds
pmcputemp coretemp   # pass the coretemp module to the setup helper
```

The right-click menu offers:

- **Help**: runs `mdview /usr/share/pmcputemp '' '' 'pmcputemp help'`.
- **Info**: shows the output of the lm_sensors `sensors` command.
- **About**: shows the program name, version and a short description.
- **Quit**: closes the monitor.

The tooltip shows the number of processors and the clock speed of each core,
taken from `/proc/cpuinfo`.

## Configuration

The configuration file is `pmcputemp/pmcputemprc` under `$XDG_CONFIG_HOME`,
or under `~/.config` when that variable is not set. The first word in the
file is the path of the kernel file that reports the temperature in
millidegrees Celsius.

- If the configuration file is missing, the program runs the `pmcputemp-sh`
  helper through `bash` to create it.
- If the configured path cannot be opened, the configuration file is deleted
  and created again.
- If the configuration file is empty, the program reads it again.

The rendered icon is written as `temp.png` to `$XDG_RUNTIME_DIR`. If that
variable is not set, it goes to `$XDG_CACHE_HOME`, or to `~/.cache`.

A reading below 10 °C or above 125 °C is treated as an error. So is a sensor
file that does not start with a number, and so is a failure of the helper.
The program also gives up after more than ten failed attempts to find the
sensor. When it gives up, it prints the reason and shows an About window that
says the program does not work on this system. If no window can be shown, it
prints a message instead. The exit status is 1.

## Library use

The parts can be used on their own:

- `pmcputemp.temperature.TemperatureSource(config_path, module=None, max_tries=10)`:
  `read()` returns the temperature in whole degrees. It raises
  `TemperatureError` when it fails. `parse_millidegrees(text)` returns the
  leading integer of a sensor file's text.
- `pmcputemp.icon.render_icon(temp, style=Style.DEFAULT, path=None)` draws the
  icon as a Pillow image. It also saves the icon as a PNG when a path is
  given. `palette_for(style, temp)` returns the `Palette` (gradient, text
  colour, text sizes) that the icon uses.
- `pmcputemp.cpuinfo`: `count_processors(path)`, `cpu_frequencies(path)` and
  `build_tooltip(path, with_version=True)` read a cpuinfo file.
- `pmcputemp.sensors.read_sensors(command=("sensors",))` returns at most 1024
  bytes of a command's output as text. It returns `"No data"` when the command
  cannot be run or prints nothing. `sensor_gui()` shows the output of
  `sensors` in a window.
- `pmcputemp.about.render_about(supported=True, lang=None)` draws the 320×180
  About image. `lang_font(lang)` picks a CJK font family for Chinese,
  Japanese and Korean locales. `show_about(supported)` shows the image in a
  window.
- `pmcputemp.app.parse_args(argv)` turns command-line arguments into
  `Options` (`style`, `interval` in milliseconds, `module`).
  `main(argv=None)` runs the monitor.

## What it does not do

The monitor is an ordinary small window. It does not place an icon in the
desktop's system tray or notification area. The `pmcputemp-sh` helper that
creates the configuration file and the `mdview` help viewer are not part of
this package. They must be installed separately.