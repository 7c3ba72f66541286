# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Streaming pretty-printer for tag-based markup.

Emitter writes indented HTML/XML-like markup to a sink as soon as
open/text/close calls arrive, nothing is buffered. Each element
is opened with one of three shapes which control line breaks
around its tags:
  inline  Outer<name>Inner</name>Outer
  meta    Outer
          <name>
          Inner</name>
          Outer
  block   Outer
          <name>
              Inner
          </name>
          Outer

Open calls return handles which close the element when released:
  with emitter.open_block('body'):
    emitter.write_text('Hello')
"""

import itertools
import logging
from enum import IntEnum, unique

from tagemit.common.error import ScopeViolation
from tagemit.settings import Settings

logger = logging.getLogger(__name__)

@unique
class Shape(IntEnum):
  """Layout of element tags."""

  INLINE = 1
  META   = 2
  BLOCK  = 3

def _open_tag(name, attrs):
  if attrs:
    return f'<{name} {attrs}>'
  return f'<{name}>'

def _close_tag(name):
  return f'</{name}>'

class Element:
  """Element which is currently open."""

  def __init__(self, name, shape, token):
    self.name = name
    self.shape = shape
    self.token = token

  def __repr__(self):
    return f'Element({self.name!r}, {self.shape.name}, #{self.token})'

class ElementHandle:
  """Scope handle which closes its element when released.

     Release it either by leaving a with-statement or by calling close().
     Handle can be released only once.
  """

  def __init__(self, emitter, token):
    self.emitter = emitter
    self.token = token
    self.closed = False

  def close(self):
    self.emitter.close(self)

  def __enter__(self):
    return self

  def __exit__(self, type, value, traceback):
    self.close()

  def __repr__(self):
    state = 'closed' if self.closed else 'open'
    return f'ElementHandle(#{self.token}, {state})'

class Emitter:
  """Formats markup and passes it to sink.

     State consists of stack of open elements, current indentation
     depth (number of open block elements) and a flag which tells
     whether next write starts a fresh line.

     Note that closing tag of meta element is not preceded by a line
     break, it follows the last line of contents (<title>Home</title>
     is printed as "<title>" and "Home</title>").
  """

  def __init__(self, write, settings=None):
    self._write = write
    self._settings = settings or Settings()
    self._stack = []
    self._depth = 0
    self._at_line_start = True
    self._tokens = itertools.count(1)

  @property
  def settings(self):
    return self._settings

  @property
  def depth(self):
    return self._depth

  @property
  def at_line_start(self):
    return self._at_line_start

  @property
  def open_elements(self):
    """Names of open elements, outermost first."""
    return tuple(elem.name for elem in self._stack)

  def _emit(self, text, depth=None):
    """Writes text, indenting it if it starts a line."""
    if not text:
      return
    if self._at_line_start:
      if depth is None:
        depth = self._depth
      text = self._settings.indent * depth + text
    self._write(text)
    self._at_line_start = False

  def _newline(self, depth_delta=0):
    """Ends current line (if any) and adjusts depth."""
    if not self._at_line_start:
      self._write(self._settings.newline)
      self._at_line_start = True
    self._depth += depth_delta

  def _open(self, name, attrs, shape):
    token = next(self._tokens)
    logger.debug(f"open: {_open_tag(name, attrs)} ({shape.name.lower()}) "
                 f"at depth {self._depth}")
    if shape != Shape.INLINE:
      self._newline()
    self._emit(_open_tag(name, attrs))
    if shape == Shape.BLOCK:
      self._newline(1)
    elif shape == Shape.META:
      self._newline()
    # Push only after sink accepted the tag
    self._stack.append(Element(name, shape, token))
    return ElementHandle(self, token)

  def open_inline(self, name, attrs=None):
    """Opens element which does not break lines."""
    return self._open(name, attrs, Shape.INLINE)

  def open_meta(self, name, attrs=None):
    """Opens element whose tags occupy separate lines."""
    return self._open(name, attrs, Shape.META)

  def open_block(self, name, attrs=None):
    """Opens element whose contents are indented."""
    return self._open(name, attrs, Shape.BLOCK)

  def write_void_inline(self, name, attrs=None):
    """Writes tag without closing counterpart."""
    self._emit(_open_tag(name, attrs))

  def write_void_meta(self, name, attrs=None):
    """Writes tag without closing counterpart on a separate line."""
    self._newline()
    self._emit(_open_tag(name, attrs))
    self._newline()

  def write_text(self, text):
    """Writes text verbatim.

       Text is split on configured line terminator and each part
       is written on its own (indented) line.
    """
    nl = self._settings.newline
    if nl not in text:
      self._emit(text)
      return
    lines = text.split(nl)
    self._emit(lines[0])
    for line in lines[1:]:
      if self._at_line_start:
        # Caller asked for an empty line
        self._write(nl)
      else:
        self._newline()
      self._emit(line)

  def close(self, handle):
    """Closes element which was opened with handle.

       Handle must refer to the innermost open element.
    """
    elem = self._check_top(handle)
    logger.debug(f"close: {_close_tag(elem.name)} ({elem.shape.name.lower()}) "
                 f"at depth {self._depth}")
    if elem.shape == Shape.BLOCK:
      self._newline()
      self._emit(_close_tag(elem.name), self._depth - 1)
      self._newline()
    else:
      self._emit(_close_tag(elem.name))
      if elem.shape == Shape.META:
        self._newline()
    self._stack.pop()
    if elem.shape == Shape.BLOCK:
      self._depth -= 1
    handle.closed = True

  def _check_top(self, handle):
    if handle.emitter is not self:
      raise ScopeViolation(f"{handle} belongs to another emitter")
    if handle.closed:
      raise ScopeViolation(f"{handle} has already been released")
    if not self._stack:
      raise ScopeViolation(f"{handle} released when no elements are open")
    top = self._stack[-1]
    if top.token != handle.token:
      raise ScopeViolation(f"{handle} released while {top} is still open")
    return top
