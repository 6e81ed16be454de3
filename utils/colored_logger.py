#!/usr/bin/env python3
"""
Colored Logger
"""

import logging
import sys
import os
from typing import Dict


if os.name == 'nt':
    import colorama
    colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):

    COLORS: Dict[str, str] = {
        'DEBUG': '\033[95m',
        'INFO': '\033[94m',
        'WARNING': '\033[93m',
        'ERROR': '\033[91m',
        'CRITICAL': '\033[95m'
    }

    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, stream=None):
        if fmt is None:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        super().__init__(fmt, datefmt)
        self.stream = stream or sys.stdout

    def format(self, record):
        log_message = super().format(record)

        if not self._supports_color():
            return log_message

        color = self.COLORS.get(record.levelname, '')
        if color:
            return f"{color}{log_message}{self.RESET}"

        return log_message

    def _supports_color(self):
        if not hasattr(self.stream, 'isatty') or not self.stream.isatty():
            return False

        if os.name == 'nt':
            return True

        term = os.environ.get('TERM', '')
        return term != 'dumb' and term != ''


def setup_colored_logging(level=logging.INFO, stream=None):
    stream = stream or sys.stdout

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(stream=stream))

    root_logger.addHandler(console_handler)

    # discord.py is chatty at INFO
    logging.getLogger('discord').setLevel(max(level, logging.WARNING))

    return root_logger
