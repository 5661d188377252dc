"""Command line entry point for myshell."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ShellConfig
from .shell import Shell

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str):
    """Send the diagnostic log to stderr so stdout carries only shell output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def configure_streams():
    """Pass undecodable input bytes through to commands and back out unchanged."""
    for stream in (sys.stdin, sys.stdout):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: Optional[List[str]] = None) -> int:
    config = ShellConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="myshell",
        description="Interactive shell with echo, type, pwd, cd and exit builtins.",
    )
    parser.add_argument(
        "--prompt", default=config.prompt, help="Prompt printed before each command"
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Diagnostic log level (log is written to stderr)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    config.prompt = args.prompt
    config.log_level = args.log_level
    configure_logging(config.log_level)
    configure_streams()

    shell = Shell(config=config)
    try:
        shell.repl()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130
    return 0
