from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

import uvicorn

from errorfinder.capability import resolve_error_capability
from errorfinder.config import Config
from errorfinder.errors import ErrorFinderError
from errorfinder.logger import setup_logging
from errorfinder.pipeline import run

logger = logging.getLogger("errorfinder")


def main(argv: Optional[List[str]] = None, out: Optional[BinaryIO] = None) -> int:
	parser = argparse.ArgumentParser(
		prog="errorfinder",
		description="List sentinel errors and error classes declared in Python modules as CSV.",
	)
	parser.add_argument(
		"patterns",
		nargs="*",
		help="Import paths, directories or .py files; a trailing ... recurses",
	)
	args = parser.parse_args(argv)

	config = Config.from_env()
	setup_logging(level=config.log_level, log_file=config.log_file)
	capability = resolve_error_capability()
	try:
		run(args.patterns, out if out is not None else sys.stdout.buffer, capability, config)
	except ErrorFinderError as exc:
		logger.error("%s", exc)
		return 1
	return 0


def serve_main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="errorfinder-serve")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)

	config = Config.from_env()
	setup_logging(level=config.log_level, log_file=config.log_file)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	sys.exit(main())
