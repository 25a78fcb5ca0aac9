"""Filesystem side of a generator run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from bpgen.config import Config
from bpgen.renderer import RenderedFiles

log = logging.getLogger(__name__)


def ensure_component_dir(config: Config) -> Tuple[Path, bool]:
    """Ensure the component directory exists.

    Creation is not recursive: a name whose parent directories are missing
    fails here with the underlying ``OSError``.

    Returns:
        The directory path and whether this call created it.
    """
    component_dir = config.component_dir
    if component_dir.exists():
        log.debug(f"Reusing existing directory {component_dir}")
        return component_dir, False

    component_dir.mkdir()
    log.debug(f"Created directory {component_dir}")
    return component_dir, True


def write_files(config: Config, rendered: RenderedFiles) -> Tuple[Path, Path]:
    """Write the component then its styles, replacing existing files."""
    component_path = config.component_path
    styles_path = config.styles_path

    component_path.write_text(rendered.component, encoding="utf-8")
    log.debug(f"Wrote {component_path}")

    styles_path.write_text(rendered.styles, encoding="utf-8")
    log.debug(f"Wrote {styles_path}")

    return component_path, styles_path
