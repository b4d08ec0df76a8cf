"""Check whether a directory looks like an app base under a given layout."""

from __future__ import annotations

import logging
from pathlib import Path

from projlayout.helpers import is_readable_dir, is_readable_file
from projlayout.layout.base import ProjectLayout

log = logging.getLogger(__name__)


def probe_app_base(app_base: Path, layout: ProjectLayout) -> bool:
    """True if app_base has a readable conf file or a readable source dir where layout expects them."""
    conf = layout.conf(app_base)
    if is_readable_file(conf):
        log.debug("%s: conf file %s found", app_base, conf)
        return True
    src = layout.source(app_base)
    if is_readable_dir(src):
        log.debug("%s: source dir %s found", app_base, src)
        return True
    return False
