"""Lightweight logging utilities and the console reporter for game messages."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


class ConsoleReporter:
    """Reporting sink: errors go through log_event, moves and outcomes print plainly."""

    def err_msg(self, fmt, *args):
        log_event(fmt % args if args else fmt)

    def move_msg(self, fmt, *args):
        print(fmt % args if args else fmt)

    def outcome_msg(self, fmt, *args):
        print(fmt % args if args else fmt)
