from .json_report import JSONReporter
from .terminal_report import print_terminal_summary

__all__ = ["JSONReporter", "print_terminal_summary"]
