"""Component boilerplate generation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bpgen.config import Config
from bpgen.renderer import RenderContext, render_files
from bpgen.reporter import ConsoleReporter
from bpgen.tokens import generate_class_token
from bpgen.writer import ensure_component_dir, write_files

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    component_dir: Path
    component_path: Path
    styles_path: Path
    class_token: Optional[str]
    created_dir: bool


def generate_component(
    config: Config,
    reporter: Optional[ConsoleReporter] = None,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """Scaffold one component: ensure its directory, render, write, report.

    For variants that use a class token, the token is generated once here
    and shared by both rendered files. Filesystem errors are not caught; if
    the styles write fails the component file is left behind.
    """
    reporter = reporter or ConsoleReporter()
    reporter.start()

    component_dir, created = ensure_component_dir(config)

    class_token = None
    if config.variant.uses_class_token:
        class_token = generate_class_token(rng=rng)
        log.debug(f"Generated class token {class_token}")

    context = RenderContext(name=config.name, class_token=class_token)
    rendered = render_files(config.variant, context)

    component_path, styles_path = write_files(config, rendered)

    reporter.file_written(component_path)
    reporter.file_written(styles_path)
    reporter.done()

    return GenerationResult(
        component_dir=component_dir,
        component_path=component_path,
        styles_path=styles_path,
        class_token=class_token,
        created_dir=created,
    )
