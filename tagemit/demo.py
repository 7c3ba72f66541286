# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Sample document which exercises all element shapes."""

def write_home_page(e):
  """Writes simple HTML home page to emitter."""
  nl = e.settings.newline
  with e.open_block('html'):
    with e.open_block('head'):
      with e.open_meta('title'):
        e.write_text('Home')
    with e.open_block('body'):
      with e.open_block('h1'):
        e.write_text('Welcome')
      with e.open_block('p'):
        e.write_text('Welcome to my ')
        with e.open_inline('b'):
          e.write_text('website')
        e.write_text('!')
      with e.open_block('div', "style='font-family: Bahnschrift'"):
        e.write_text('Line 1' + nl + 'Still line 1')
        e.write_void_meta('br')
        e.write_text('Line 2')
