#!/usr/bin/env python3

# The MIT License (MIT)
# 
# Copyright (c) 2018-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for Tagemit project.

Run with --help for details.
"""

import sys
import argparse
import logging

from tagemit.common.error import ScopeViolation, error, error_if, warn_if, set_basename, set_options
from tagemit.emitter import Emitter
from tagemit.settings import Settings, NEWLINES
from tagemit.sinks import stream_sink
from tagemit import demo

logger = logging.getLogger(__name__)

def _render(out, settings):
  e = Emitter(stream_sink(out), settings)
  try:
    demo.write_home_page(e)
  except ScopeViolation as ex:
    error(f"internal error: {ex}")
  logger.debug(f"render: finished at depth {e.depth}")

def main():
  set_basename('tagemit')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Streaming pretty-printer for HTML/XML-like markup. "
                "Renders a sample home page.",
    epilog="""\
Examples:
  Print sample page:
  $ {exe}

  Indent with tabs and use DOS line endings:
  $ {exe} --tabs --newline crlf -o page.html\
""".format(exe='python -mtagemit'))
  parser.add_argument(
    '--indent',
    metavar='N',
    help="Indent nested elements by N spaces (4 if not specified).",
    type=int)
  parser.add_argument(
    '--tabs',
    help="Indent nested elements by tabs.",
    action='store_true')
  parser.add_argument(
    '--newline',
    help="Line terminator.",
    choices=list(NEWLINES),
    default='native')
  parser.add_argument(
    '--output', '-o',
    metavar='FILE',
    help="Write markup to FILE instead of stdout.")
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args()

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack)

  error_if(args.indent is not None and args.indent < 0,
           f"indent must be non-negative, got {args.indent}")
  warn_if(args.tabs and args.indent is not None, "--indent is ignored when --tabs is given")

  if args.tabs:
    indent = '\t'
  elif args.indent is not None:
    indent = ' ' * args.indent
  else:
    indent = None
  settings = Settings(newline=NEWLINES[args.newline])
  if indent is not None:
    settings = settings.replace(indent=indent)

  if args.output is None:
    _render(sys.stdout, settings)
  else:
    with open(args.output, 'w', newline='') as f:
      _render(f, settings)

if __name__ == '__main__':
  main()
