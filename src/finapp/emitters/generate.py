# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Platform dispatch for code emission."""

from __future__ import annotations

import logging
from collections.abc import Callable

from finapp.emitters.android import emit_android
from finapp.emitters.base import EmitterError
from finapp.emitters.ios import emit_ios
from finapp.emitters.web import emit_web
from finapp.model.entities import Application, Platform

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def emit(app: Application, platform: Platform | str) -> dict[str, str]:
    """Render the sources of *app* for one platform.

    Args:
        app: A reconciled application, ideally free of validation errors.
        platform: A :class:`Platform` or its name (``web``, ``ios``, ``android``).

    Returns:
        Mapping of POSIX-style relative path to file contents.

    Raises:
        EmitterError: If the platform is unknown or a template fails to render.
    """
    if not isinstance(platform, Platform):
        try:
            platform = Platform(platform)
        except ValueError:
            choices = ", ".join(p.value for p in Platform)
            raise EmitterError(f"Unknown platform '{platform}' (expected one of: {choices})") from None
    logger.info("Generating %s code for %s", platform.value, app.name)
    files = _EMITTERS[platform](app)
    logger.debug("Rendered %d %s files", len(files), platform.value)
    return files


# ################
# Implementation
# ################

_EMITTERS: dict[Platform, Callable[[Application], dict[str, str]]] = {
    Platform.WEB: emit_web,
    Platform.IOS: emit_ios,
    Platform.ANDROID: emit_android,
}
