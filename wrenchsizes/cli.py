"""Console front end: print the metric/SAE closeness report to stdout.

Progress and diagnostics go to stderr through logging, so the report itself
can be redirected to a file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wrenchsizes.api.request import RequestError, build_request
from wrenchsizes.config.settings import SizeSettings, get_settings
from wrenchsizes.engine.job import ConversionJob, JobStatus

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CANCELLED = 1
EXIT_INVALID = 2
EXIT_FAILED = 3

_POLL_SECONDS = 0.1


def build_parser(settings: SizeSettings) -> argparse.ArgumentParser:
    d = settings.defaults
    parser = argparse.ArgumentParser(
        prog="wrenchsizes",
        description="Metric wrench sizes close to fractional inch (SAE) sizes.",
    )
    parser.add_argument("--metric-from", default=d.metric_first, help="first metric size in mm")
    parser.add_argument("--metric-to", default=d.metric_last, help="last metric size in mm")
    parser.add_argument(
        "--metric-unit",
        default=d.metric_unit,
        choices=list(settings.metric_units),
        help="metric step in mm",
    )
    parser.add_argument("--sae-from", default=d.sae_first, help="first SAE size in inches")
    parser.add_argument("--sae-to", default=d.sae_last, help="last SAE size in inches")
    parser.add_argument(
        "--sae-unit",
        default=d.sae_unit,
        choices=list(settings.sae_units),
        help="SAE step in inches",
    )
    parser.add_argument(
        "--bias",
        default=d.bias,
        help="added before rounding to the nearest step, from -1.0 to +1.0",
    )
    parser.add_argument(
        "--list-units", action="store_true", help="show the available steps and exit"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _print_line(line: str) -> None:
    print(line, flush=True)


def _wait_for(job: ConversionJob) -> None:
    """Wait for the job; Ctrl-C cancels it and waits for the worker to stop."""
    try:
        while not job.wait(_POLL_SECONDS):
            pass
    except KeyboardInterrupt:
        job.cancel()
        job.wait()
        print("Cancelled by user.", flush=True)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    if args.list_units:
        print("Metric units (mm): " + ", ".join(settings.metric_units))
        print("SAE units (inch): " + ", ".join(settings.sae_units))
        return EXIT_OK

    try:
        request = build_request(
            metric_first=args.metric_from,
            metric_last=args.metric_to,
            sae_first=args.sae_from,
            sae_last=args.sae_to,
            metric_unit=args.metric_unit,
            sae_unit=args.sae_unit,
            bias=args.bias,
            settings=settings,
        )
    except RequestError as exc:
        logger.debug("Rejected %s: %s", exc.field, exc.detail)
        print(exc.detail, file=sys.stderr)
        return EXIT_INVALID

    job = ConversionJob(request, _print_line)
    job.start()
    try:
        _wait_for(job)
    except Exception as exc:
        logger.error("Report stopped: %s: %s", type(exc).__name__, exc)
        return EXIT_FAILED

    return EXIT_CANCELLED if job.status is JobStatus.CANCELLED else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
