# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import sys

import pytest

from tagemit import demo
from tagemit import __main__ as M
from tagemit.emitter import Emitter
from tagemit.settings import Settings
from tagemit.sinks import StringSink

PAGE = [
  "<html>",
  "    <head>",
  "        <title>",
  "        Home</title>",
  "    </head>",
  "    <body>",
  "        <h1>",
  "            Welcome",
  "        </h1>",
  "        <p>",
  "            Welcome to my <b>website</b>!",
  "        </p>",
  "        <div style='font-family: Bahnschrift'>",
  "            Line 1",
  "            Still line 1",
  "            <br>",
  "            Line 2",
  "        </div>",
  "    </body>",
  "</html>",
  "",
]

def test_home_page():
  out = StringSink()
  e = Emitter(out, Settings(newline='\n'))
  demo.write_home_page(e)
  assert str(out) == '\n'.join(PAGE)
  assert e.depth == 0 and e.open_elements == ()

def test_home_page_crlf():
  out = StringSink()
  e = Emitter(out, Settings('  ', '\r\n'))
  demo.write_home_page(e)
  lines = str(out).split('\r\n')
  assert lines[-1] == ''
  assert lines[13] == '      Line 1' and lines[14] == '      Still line 1'

def test_main(monkeypatch, capsys):
  monkeypatch.setattr(sys, 'argv', ['tagemit', '--newline', 'lf'])
  M.main()
  assert capsys.readouterr().out == '\n'.join(PAGE)

def test_main_tabs(monkeypatch, capsys):
  monkeypatch.setattr(sys, 'argv', ['tagemit', '--tabs', '--indent', '2', '--newline', 'lf'])
  M.main()
  captured = capsys.readouterr()
  assert '\n\t<head>\n' in captured.out
  assert 'warning' in captured.err

def test_main_output(monkeypatch, tmp_path):
  path = tmp_path / 'page.html'
  monkeypatch.setattr(sys, 'argv', ['tagemit', '--indent', '2', '--newline', 'crlf', '-o', str(path)])
  M.main()
  with open(path, 'r', newline='') as f:
    text = f.read()
  assert text.startswith('<html>\r\n  <head>\r\n')

def test_main_bad_indent(monkeypatch, capsys):
  monkeypatch.setattr(sys, 'argv', ['tagemit', '--indent', '-1'])
  with pytest.raises(SystemExit):
    M.main()
  assert 'error' in capsys.readouterr().err
