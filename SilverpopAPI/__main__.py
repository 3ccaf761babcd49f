# SilverpopAPI/__main__.py
"""
Send one raw XMLAPI call and print the response.

Usage:
    python -m SilverpopAPI GetLists request.xml
    echo '<VISIBILITY>1</VISIBILITY><LIST_TYPE>2</LIST_TYPE>' | silverpop-request GetLists

Endpoint and credentials come from SILVERPOP_* environment variables
(see SilverpopAPI/config.py) unless given as options.
"""
import argparse
import logging
import sys

from SilverpopAPI.api.silverpop_api import SilverpopClient
from SilverpopAPI.config import Config
from SilverpopAPI.exceptions import SilverpopConnectionError, SilverpopDataError
from SilverpopAPI.utils.xml_serializer import pretty_print_xml

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="silverpop-request", description="Execute one Silverpop XMLAPI call.")
    parser.add_argument("function", help="XMLAPI function name, e.g. GetLists")
    parser.add_argument("file", nargs="?", default="-",
                        help="raw XML placed inside <function> (default: stdin)")
    parser.add_argument("-e", "--endpoint", default=Config.SILVERPOP_ENDPOINT, help="XMLAPI URL")
    parser.add_argument("-u", "--username", default=Config.SILVERPOP_USERNAME)
    parser.add_argument("-p", "--password", default=Config.SILVERPOP_PASSWORD)
    parser.add_argument("-l", "--loglevel", default="WARNING", help="log level")
    parser.add_argument("--log", action="store_true", help="print <Fault> messages to stderr")
    parser.add_argument("--pretty", action="store_true", help="pretty-print the response")
    return parser.parse_args(argv)


def read_request(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        xml = read_request(args.file)
    except OSError as e:
        logger.error(f"Cannot read request file {args.file}: {e}")
        return 1

    try:
        with SilverpopClient(args.endpoint, args.username, args.password) as api:
            if args.log:
                api.enable_logging()
            response = api.build(args.function, xml).execute()
            faults = api.get_fault_log()
    except (SilverpopConnectionError, SilverpopDataError):
        logger.error("XMLAPI call failed", exc_info=True)
        return 1

    print(pretty_print_xml(response) if args.pretty else response)
    for fault in faults:
        print(f"Fault: {fault}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
