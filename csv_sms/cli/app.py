from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import load_settings
from ..errors import ConfigError, ConfigurationError, CsvFormatError
from ..logging.init import log_summary, setup_logging
from ..models.config_models import Credentials, SendRequest, SendSettings, StripMode
from ..models.selector import ByIndex, ByName, ColumnSelector
from ..provider.twilio_client import create_twilio_client
from ..services.dispatcher import ClientFactory
from ..services.pipeline import run_pipeline
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load ``.env`` (credential fallbacks only) and the optional settings file
- Build the SendRequest from positional arguments and flags
- Run the pipeline and wait for every send
- Print the SUMMARY line and map the outcome to an exit code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_SEND_FAILURES = 2

ENV_ACCOUNT_SID = "TWILIO_ACCOUNT_SID"
ENV_AUTH_TOKEN = "TWILIO_AUTH_TOKEN"
ENV_FROM_NUMBER = "TWILIO_FROM_NUMBER"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="csv-sms",
        description="Send SMS from CSV file",
        epilog="example: csv-sms users.csv ACXXXX XXXX +15550001111 'Hello' -c 1",
    )
    p.add_argument("csv_file", help="csv path of phone numbers")
    p.add_argument("twilio_sid", nargs="?", help=f"Twilio account SID (default: ${ENV_ACCOUNT_SID})")
    p.add_argument("twilio_auth", nargs="?", help=f"Twilio auth token (default: ${ENV_AUTH_TOKEN})")
    p.add_argument("twilio_from", nargs="?", help=f"Valid Twilio phone number to send from (default: ${ENV_FROM_NUMBER})")
    p.add_argument("message", help="SMS message body to send")
    col = p.add_mutually_exclusive_group()
    col.add_argument("-c", "--col", type=int, default=None, help="phones column index (default: 0)")
    col.add_argument("-n", "--col-name", default=None, help="phones column name")
    p.add_argument("--strict-column", action="store_true", help="Fail if --col-name is not a CSV header")
    p.add_argument("--strip-all", action="store_true", help="Strip every hyphen/space and never re-prefix '+' numbers")
    p.add_argument("--max-workers", type=int, default=None, help="Concurrent sends (default: from settings, 8)")
    p.add_argument("--config", type=Path, default=None, help="YAML settings file (default: config/sms.yml if present)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    # flags may appear between positionals, as in "file.csv -c 1 SID TOKEN FROM MSG"
    return p.parse_intermixed_args(argv)


def _selector_from_args(args: argparse.Namespace) -> ColumnSelector:
    if args.col_name is not None:
        return ByName(args.col_name)
    return ByIndex(args.col if args.col is not None else 0)


def _merge_settings(base: SendSettings, args: argparse.Namespace) -> SendSettings:
    """Apply CLI flag overrides on top of file settings."""
    max_workers = base.max_workers
    if args.max_workers is not None:
        if args.max_workers < 1:
            raise ConfigError(f"--max-workers must be >= 1, got {args.max_workers}")
        max_workers = args.max_workers
    return SendSettings(
        max_workers=max_workers,
        strip_mode=StripMode.ALL if args.strip_all else base.strip_mode,
        strict_column=args.strict_column or base.strict_column,
    )


def _build_request(args: argparse.Namespace) -> SendRequest:
    sid = args.twilio_sid or os.getenv(ENV_ACCOUNT_SID)
    auth = args.twilio_auth or os.getenv(ENV_AUTH_TOKEN)
    from_number = args.twilio_from or os.getenv(ENV_FROM_NUMBER)
    missing = [
        name
        for name, value in (("twilio-sid", sid), ("twilio-auth", auth), ("twilio-from", from_number))
        if not value
    ]
    if missing:
        raise ConfigError(f"missing {', '.join(missing)} (pass as argument or set in environment)")
    return SendRequest(
        csv_path=args.csv_file,
        credentials=Credentials(account_sid=sid, auth_token=auth),
        from_number=from_number,
        body=args.message,
        selector=_selector_from_args(args),
    )


def main(argv: list[str] | None = None, client_factory: ClientFactory = create_twilio_client) -> int:
    # None means "read the process arguments"; an explicit [] must stay empty
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    load_dotenv(dotenv_path=Path(".env"), override=False)

    try:
        settings = _merge_settings(load_settings(args.config), args)
        request = _build_request(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        result = run_pipeline(request, settings, client_factory=client_factory)
    except CsvFormatError as e:
        logger.error(f"csv: {e}")
        return EXIT_FATAL
    except OSError as e:
        logger.error(f"csv: cannot read {request.csv_path}: {e}")
        return EXIT_FATAL
    except ConfigurationError as e:
        logger.error(f"column: {e}")
        return EXIT_FATAL

    # the SUMMARY label comes from the formatter
    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.failed > 0:
        return EXIT_SEND_FAILURES
    return EXIT_SUCCESS_ALL
