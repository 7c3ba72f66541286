# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Formatting settings of emitter."""

import os

DEFAULT_INDENT = '    '

# Line terminators known to command-line driver
NEWLINES = {
  'lf'     : '\n',
  'crlf'   : '\r\n',
  'cr'     : '\r',
  'native' : os.linesep,
}

class Settings:
  """Indent unit and line terminator.

     Settings are immutable, use replace() to obtain a modified copy.
  """

  def __init__(self, indent=DEFAULT_INDENT, newline=os.linesep):
    if not isinstance(indent, str):
      raise ValueError(f"indent must be a string, got {indent!r}")
    if not isinstance(newline, str) or not newline:
      raise ValueError(f"line terminator must be a non-empty string, got {newline!r}")
    self._indent = indent
    self._newline = newline

  @property
  def indent(self):
    return self._indent

  @property
  def newline(self):
    return self._newline

  def replace(self, **changes):
    """Returns copy of settings with some fields changed."""
    fields = {'indent': self._indent, 'newline': self._newline}
    fields.update(changes)
    return Settings(**fields)

  def __eq__(self, s):
    if not isinstance(s, Settings):
      return NotImplemented
    return self._indent == s._indent and self._newline == s._newline

  def __hash__(self):
    return hash((self._indent, self._newline))

  def __repr__(self):
    return f'Settings(indent={self._indent!r}, newline={self._newline!r})'
