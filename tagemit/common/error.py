# The MIT License (MIT)
# 
# Copyright (c) 2018-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Error handling APIs."""

import sys
import os.path
from typing import NoReturn

_print_stack = False
_me = os.path.basename(sys.argv[0])

class ScopeViolation(Exception):
  """Element was closed out of order.

     This always indicates a bug in caller (mismatched open/close calls)
     and emitter must not be used after it has been raised.
  """

def error(msg) -> NoReturn:
  """Prints pretty error message and terminates."""
  sys.stderr.write(f"{_me}: error: {msg}\n")
  if _print_stack:
    raise RuntimeError(msg)
  sys.exit(1)

def error_if(cond, msg):
  """Report error if condition is true."""
  if cond:
    error(msg)

def warn(msg):
  """Prints pretty warning message."""
  sys.stderr.write(f"{_me}: warning: {msg}\n")

def warn_if(cond, msg):
  """Report warning if condition is true."""
  if cond:
    warn(msg)

def set_basename(name):
  """Set program name for error reports."""
  global _me
  _me = name

def set_options(**kwargs):
  """Set other error-reporting options."""
  for k, v in kwargs.items():
    if k == 'print_stack':
      global _print_stack
      _print_stack = v
    else:
      error("unknown option: " + k)
