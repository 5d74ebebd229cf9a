#!/usr/bin/env python3
'''
Dump the directives of a pack/unpack template.

 $ packdump.py unpack 'NnC2a*'
 $ packdump.py pack -f template.txt
'''
import os
import sys
import logging

from packformat import parse, parse_file
from packformat.exceptions import PackFormatException, StreamException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


VERSION = 'v3_2_0'


def usage(progname):
    print(f'usage: {progname} <pack|unpack> <template>')
    print(f'       {progname} <pack|unpack> -f <template file>')
    sys.exit(1)


def show_error(template, error):
    '''Print the template with a caret line under the span that failed.'''
    print(f'error: {error.message}', file=sys.stderr)
    location = error.location
    line_start = template.rfind(b'\n', 0, location.start) + 1
    line_end = template.find(b'\n', location.start)
    if line_end == -1:
        line_end = len(template)

    line = template[line_start:line_end].decode('ascii', errors='replace')
    width = min(location.end, line_end) - location.start
    print(f'  {line}', file=sys.stderr)
    print('  ' + ' ' * (location.start - line_start) + '^' * max(width, 1), file=sys.stderr)


if __name__ == '__main__':
    if len(sys.argv) < 3 or sys.argv[1] not in ('pack', 'unpack'):
        usage(sys.argv[0])

    variant = sys.argv[1]

    if sys.argv[2] == '-f':
        if len(sys.argv) < 4:
            usage(sys.argv[0])
        path = sys.argv[3]
        try:
            fmt = parse_file(VERSION, variant, path)
        except StreamException as e:
            logger.error(e, exc_info='DEBUG' in os.environ)
            sys.exit(1)
        except PackFormatException as e:
            with open(path, 'rb') as f:
                show_error(f.read(), e)
            sys.exit(1)
    else:
        template = os.fsencode(sys.argv[2])
        try:
            fmt = parse(VERSION, variant, template)
        except PackFormatException as e:
            show_error(template, e)
            sys.exit(1)

    print(fmt.describe())
