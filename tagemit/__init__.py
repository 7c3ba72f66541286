# The MIT License (MIT)
# 
# Copyright (c) 2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Streaming pretty-printer for tag-based markup."""

from tagemit.common.error import ScopeViolation
from tagemit.emitter import Emitter, ElementHandle, Shape
from tagemit.settings import Settings
from tagemit.sinks import StringSink, stream_sink
