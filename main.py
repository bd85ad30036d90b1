import sys
import logging
import argparse

from http_response import HttpResponse

LOGGER = logging.getLogger('http_response')

def parse_header(raw: str) -> tuple[str, str]:
    """Splits a "Name: value" command line argument"""
    name, sep, value = raw.partition(':')
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f'Header must look like "Name: value", got {raw!r}')
    return name.strip(), value.strip()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an HTTP/1.1 response to standard output")
    parser.add_argument('-s', '--status', type=str, default='200', help='Status code, unknown codes are labelled "Not Found"')
    parser.add_argument('-H', '--header', type=parse_header, action='append', dest='headers', help='Response header as "Name: value", may be repeated. Defaults to "Content-Type: text/html"')
    parser.add_argument('-b', '--body', type=str, default=None, help='Response body')
    parser.add_argument('-v', '--verbose', action='store_true', default=False, help='Enable verbose mode')
    return parser

_console_handler: logging.Handler | None = None

def configure_logging(verbose: bool) -> None:
    """Installs a single stderr handler on the shared logger, replacing the one from any earlier call"""
    global _console_handler
    if _console_handler is not None:
        LOGGER.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    if verbose:
        LOGGER.setLevel(logging.DEBUG)
        _console_handler.setLevel(logging.DEBUG)
    else:
        LOGGER.setLevel(logging.WARNING)
        _console_handler.setLevel(logging.WARNING)

    _log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    _date_format = "%Y-%m-%dT%H:%M:%SZ" # ISO 8601 style
    _console_handler.setFormatter(logging.Formatter(fmt=_log_format, datefmt=_date_format))

    LOGGER.addHandler(_console_handler)

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    headers = dict(args.headers) if args.headers else None
    response = HttpResponse.new(args.status, headers, args.body)
    LOGGER.debug(f'Rendering {response.status_line!r} with {len(response.headers)} header(s)')

    try:
        response.send(sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except BrokenPipeError:
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
