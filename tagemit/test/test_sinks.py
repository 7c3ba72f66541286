# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import io

import pytest

import tagemit.sinks as SI
from tagemit.emitter import Emitter
from tagemit.settings import Settings

def test_string_sink():
  out = SI.StringSink()
  out('a')
  out('')
  out('b')
  assert out.chunks == ['a', '', 'b']
  assert out.getvalue() == 'ab' and str(out) == 'ab'

def test_stream_sink():
  f = io.StringIO()
  e = Emitter(SI.stream_sink(f), Settings(newline='\n'))
  with e.open_block('a'):
    e.write_text('x')
  assert f.getvalue() == '<a>\n    x\n</a>\n'

def test_stdout_sink(capsys):
  SI.stream_sink()('hello')
  assert capsys.readouterr().out == 'hello'
