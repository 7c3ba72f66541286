# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Sinks for emitted markup.

A sink is any callable which accepts a chunk of text.
"""

import sys

def stream_sink(out=None):
  """Returns sink which writes to file-like object (stdout by default)."""
  if out is None:
    out = sys.stdout
  return out.write

class StringSink:
  """Collects emitted chunks in memory."""

  def __init__(self):
    self.chunks = []

  def __call__(self, s):
    self.chunks.append(s)

  def getvalue(self):
    return ''.join(self.chunks)

  def __str__(self):
    return self.getvalue()
