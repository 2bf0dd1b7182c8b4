"""
Parse a passport MRZ from the command line

Usage:
    python run_parse_demo.py "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<" "L898902C36UTO7408122F1204159ZE184226B<<<<<18"
    cat mrz.txt | python run_parse_demo.py
"""
import json
import logging
import sys

from config import config
from mrz_errors import MRZError
from mrz_tokens import join_mrz_lines
from passport_parser import parse

logger = logging.getLogger(__name__)


def main(argv=None, stdin=None):
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin

    mrz_text = join_mrz_lines(argv if argv else stdin.read())

    try:
        document = parse(mrz_text)
    except MRZError as e:
        logger.debug("MRZ rejected: %s", e.error_code)
        print(json.dumps(e.to_dict(), indent=2))
        return 1

    print(json.dumps(document.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    sys.exit(main())
