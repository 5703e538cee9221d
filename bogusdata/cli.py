# bogusdata/cli.py

import argparse
import logging
import sys

from bogusdata.config import Configuration, ConfigurationException, load_config_file
from bogusdata.constants import FILLERS
from bogusdata.generator import Generator
from bogusdata.report import print_summary


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='bogusdata',
        description='Fill a new DATA<n> directory with bogus test files under a total size budget')
    parser.add_argument('--scenario',
                        help='Naming scenario: UserDatabase, Backups or Random (required)')
    parser.add_argument('--max-total-size',
                        help='Upper bound for all files together, bytes or e.g. 500MB (required)')
    parser.add_argument('--size-mode', choices=['random', 'exact'],
                        help='random: sizes drawn from the remaining budget; exact: --exact-file-size per file')
    parser.add_argument('--exact-file-size', help='Per-file size for --size-mode exact')
    parser.add_argument('--file-count', type=int, help='Number of files (default: random 4-9)')
    parser.add_argument('--extensions', nargs='+', help='Allowed extensions (default: conf sql bak zip)')
    parser.add_argument('--keyword', help='Prefix injected into generated file names')
    parser.add_argument('--created-date', help='Backdate files to this day, MM/DD/YYYY or MM/DD/YY')
    parser.add_argument('--base-dir', help='Directory in which DATA<n> is created (default: cwd)')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible names and sizes')
    parser.add_argument('--filler', choices=FILLERS, help='Filler byte source (default: urandom)')
    parser.add_argument('--keep-headers', action='store_true', default=None,
                        help='Start conf/sql/zip files with a header stub instead of pure filler')
    parser.add_argument('--skip-space-check', dest='check_space', action='store_false', default=None,
                        help='Do not compare the budget with free disk space')
    parser.add_argument('--max-file-size', help='Absolute per-file ceiling (default: 2GB)')
    parser.add_argument('--config', help='JSON file with default option values')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s,%(levelname)s,%(name)s,%(message)s",
    )

    options = {}
    try:
        if args.config:
            options.update(load_config_file(args.config))
        options.update({k: v for k, v in vars(args).items()
                        if v is not None and k not in ('config', 'verbose')})
        config = Configuration.from_options(options)
        logger.debug("CLI,RUN,START,scenario=%s,max_total_size=%s",
                     config.scenario, config.max_total_size)
        result = Generator(config).run()
    except ConfigurationException as e:
        logger.error("CLI,RUN,ERROR,%s", e)
        return 1
    except OSError as e:
        logger.exception("CLI,RUN,ERROR,%s", e)
        return 1

    print_summary(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
