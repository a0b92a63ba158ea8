#!/usr/bin/env python3

# -*- coding: utf-8 -*-

"""
Console and file logging for programs and test runs that want to see what
their `Pushd` guards are doing.

```py
with cli_log_config(verbose=3):
    with Pushd.new("/tmp/build"):
        ...
```

prints (with color):

```txt
DEBUG | pushd.pushd: set current dir to /tmp/build from /home/me
DEBUG | pushd.pushd: setting current dir back to /home/me
```
"""

import logging
import typing as t
from textwrap import indent
from pretty_traceback.formatting import exc_to_traceback_str

from . import settings


_ansi_colors = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}
_ansi_reset_all = "\033[0m"

Color = t.Union[int, t.Tuple[int, int, int], str]


def _interpret_color(color: Color, offset: int = 0) -> str:
    if isinstance(color, int):
        return f"{38 + offset};5;{color:d}"

    if isinstance(color, (tuple, list)):
        r, g, b = color
        return f"{38 + offset};2;{r:d};{g:d};{b:d}"

    return str(_ansi_colors[color] + offset)


def style(
    text: t.Any,
    fg: t.Optional[Color] = None,
    bg: t.Optional[Color] = None,
    bold: t.Optional[bool] = None,
    reset: bool = True,
) -> str:
    bits = []

    for color, offset in ((fg, 0), (bg, 10)):
        if not color:
            continue
        try:
            bits.append(f"\033[{_interpret_color(color, offset)}m")
        except KeyError:
            raise TypeError(f"Unknown color {color!r}") from None

    if bold is not None:
        bits.append(f"\033[{1 if bold else 22}m")

    bits.append(str(text))
    if reset:
        bits.append(_ansi_reset_all)
    return "".join(bits)


default_formats = {
    logging.DEBUG: style("DEBUG", fg="cyan") + " | " + style("%(name)s: %(message)s", fg="cyan"),
    #
    logging.INFO: "%(message)s",
    #
    logging.WARNING: style("WARN ", fg="yellow") + " | " + style("%(name)s: %(message)s", fg="yellow"),
    #
    logging.ERROR: style("ERROR", fg="red") + " | " + style("%(message)s", fg="red"),
    #
    logging.CRITICAL: style("FATAL", fg="white", bg="red", bold=True) + " | " + style("%(message)s", fg="red", bold=True),
}

verbosities = {
    0: logging.CRITICAL,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


class PrettyExceptionFormatter(logging.Formatter):
    """Uses pretty-traceback to format exceptions"""

    def __init__(self, *args, color=True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.color = color

    def formatException(self, ei):
        _, exc_value, traceback = ei
        return exc_to_traceback_str(exc_value, traceback, color=self.color)

    def format(self, record: logging.LogRecord):
        record.message = record.getMessage()

        if self.usesTime():
            record.asctime = self.formatTime(record, self.datefmt)

        s = self.formatMessage(record)

        if record.exc_info:
            if s[-1:] != "\n":
                s += "\n"
            # indented so the traceback reads as part of the message above it
            s += indent(self.formatException(record.exc_info), " " * 4)

        return s


class MultiFormatter(PrettyExceptionFormatter):
    """Format log messages differently for each log level"""

    def __init__(self, formats: t.Optional[t.Dict[int, str]] = None, **kwargs):
        super().__init__(kwargs.pop("fmt", None), **kwargs)

        self.formatters = {
            level: PrettyExceptionFormatter(fmt, **kwargs) for level, fmt in (formats or default_formats).items()
        }

    def format(self, record: logging.LogRecord):
        formatter = self.formatters.get(record.levelno)

        if formatter is None:
            return super().format(record)

        return formatter.format(record)


class LoggingContext:
    """Sets a level and/or attaches a handler for the duration of a block"""

    def __init__(
        self,
        logger: t.Optional[logging.Logger] = None,
        level: t.Optional[int] = None,
        handler: t.Optional[logging.Handler] = None,
        close: bool = True,
    ):
        self.logger = logger or logging.root
        self.level = level
        self.handler = handler
        self.close = close

    def __enter__(self):
        if self.level is not None:
            self.old_level = self.logger.level
            self.logger.setLevel(self.level)

        if self.handler:
            self.logger.addHandler(self.handler)

    def __exit__(self, *exc_info):
        if self.level is not None:
            self.logger.setLevel(self.old_level)

        if self.handler:
            self.logger.removeHandler(self.handler)
            if self.close:
                self.handler.close()


class MultiContext:
    """Enters contexts in order and exits them in reverse"""

    def __init__(self, *contexts) -> None:
        self.contexts = contexts

    def __enter__(self):
        return tuple(ctx.__enter__() for ctx in self.contexts)

    def __exit__(self, *exc_info):
        for ctx in reversed(self.contexts):
            ctx.__exit__(*exc_info)


def cli_log_config(
    logger: t.Optional[logging.Logger] = None,
    verbose: t.Optional[int] = None,
    filename: t.Optional[str] = None,
    file_verbose: t.Optional[int] = None,
) -> MultiContext:
    """
    Logging configuration for a CLI application or a test run.
    Prettified messages go to the console; a log file, if asked for, gets
    plain lines with timestamps and logger names.

    Parameters
    ----------
    logger : logging.Logger, default None
        The logger to configure. If None, configures the `pushd` logger.
    verbose : int from 0 to 3, default None
        0 shows critical errors, 1 warnings, 2 info, 3 and above debug.
        If None, read from PUSHD_LOG_VERBOSITY (default 2).
    filename : str, default None
        Log file to write to. If None, no log file is written.
    file_verbose : int from 0 to 3, default None
        Verbosity for the log file. If None, is set to `verbose`.

    Returns
    -------
    A context manager that configures the logger and restores the previous
    configuration afterwards.
    """

    if logger is None:
        logger = logging.getLogger("pushd")

    if verbose is None:
        verbose = settings.log_verbosity()

    if file_verbose is None:
        file_verbose = verbose

    console_level = verbosities.get(verbose, logging.DEBUG)
    file_level = verbosities.get(file_verbose, logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(MultiFormatter())
    console_handler.setLevel(console_level)

    contexts = [
        LoggingContext(logger=logger, level=min(console_level, file_level)),
        LoggingContext(logger=logger, handler=console_handler, close=False),
    ]

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(PrettyExceptionFormatter("%(levelname)s:%(asctime)s:%(name)s:%(message)s", color=False))
        file_handler.setLevel(file_level)
        contexts.append(LoggingContext(logger=logger, handler=file_handler))

    return MultiContext(*contexts)
