# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code emitters turning a FinApp application into web, iOS and Android sources."""

from finapp.emitters.android import android_package, emit_android
from finapp.emitters.base import EmitterError, write_outputs
from finapp.emitters.generate import emit
from finapp.emitters.ios import emit_ios
from finapp.emitters.web import emit_web

__all__ = [
    "EmitterError",
    "android_package",
    "emit",
    "emit_android",
    "emit_ios",
    "emit_web",
    "write_outputs",
]
