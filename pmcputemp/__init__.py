"""A small CPU temperature monitor: sensor reading, icon drawing, tooltip, sensors and About windows."""

__version__ = "1.0.0"