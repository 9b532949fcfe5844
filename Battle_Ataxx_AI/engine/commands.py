"""Parsing of text commands and move tokens typed by players or read from scripts."""

import re
from collections import namedtuple
from enum import Enum


class CommandType(Enum):
    AUTO = "auto"
    MANUAL = "manual"
    BLOCK = "block"
    SEED = "seed"
    START = "start"
    CLEAR = "clear"
    DUMP = "dump"
    PASS = "pass"
    LOAD = "load"
    QUIT = "quit"
    HELP = "help"
    PIECEMOVE = "move"
    EOF = "eof"


Command = namedtuple("Command", ["type", "operands"])

# (pattern, type); operands are the regex groups.
_PATTERNS = [
    (re.compile(r"auto\s+(red|blue)", re.IGNORECASE), CommandType.AUTO),
    (re.compile(r"manual\s+(red|blue)", re.IGNORECASE), CommandType.MANUAL),
    (re.compile(r"block\s+([a-g][1-7])"), CommandType.BLOCK),
    (re.compile(r"seed\s+(\d+)"), CommandType.SEED),
    (re.compile(r"start"), CommandType.START),
    (re.compile(r"clear"), CommandType.CLEAR),
    (re.compile(r"dump"), CommandType.DUMP),
    (re.compile(r"pass|-"), CommandType.PASS),
    (re.compile(r"load\s+(\S+)"), CommandType.LOAD),
    (re.compile(r"quit"), CommandType.QUIT),
    (re.compile(r"help|\?"), CommandType.HELP),
    (re.compile(r"([a-z])(\d)-([a-z])(\d)"), CommandType.PIECEMOVE),
]


def parse_command(line):
    """
    Turn one line of input into a Command. None (end of input) yields an EOF
    command; blank lines and '#' comments yield None. Anything unrecognized
    raises ValueError.
    """
    if line is None:
        return Command(CommandType.EOF, ())
    text = line.split("#", 1)[0].strip()
    if not text:
        return None
    for pattern, cmd_type in _PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return Command(cmd_type, match.groups())
    raise ValueError("command not understood.")
