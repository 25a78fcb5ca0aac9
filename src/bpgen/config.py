"""Run configuration for a single generator invocation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from bpgen.exceptions import InvalidInputError


class Variant(str, Enum):
    """Template set used to render a component."""

    IONIC = "ionic"
    SCOPED = "scoped"

    @property
    def template_dir(self) -> str:
        return self.value

    @property
    def component_ext(self) -> str:
        return "tsx"

    @property
    def styles_ext(self) -> str:
        return "js"

    @property
    def uses_class_token(self) -> bool:
        return self is Variant.SCOPED


@dataclass(frozen=True)
class Config:
    name: str
    base_dir: Path
    variant: Variant = Variant.IONIC

    @property
    def component_dir(self) -> Path:
        return self.base_dir / self.name

    @property
    def component_path(self) -> Path:
        return self.component_dir / f"{self.name}.{self.variant.component_ext}"

    @property
    def styles_path(self) -> Path:
        return self.component_dir / f"{self.name}.styles.{self.variant.styles_ext}"


def load_config(
    name: Optional[str],
    variant: Union[Variant, str] = Variant.IONIC,
    base_dir: Optional[Union[str, Path]] = None,
) -> Config:
    """Build the run configuration from the component name argument.

    The name is taken verbatim. Only its presence is checked: ``None`` and
    the empty string both raise :class:`InvalidInputError` before anything
    touches the filesystem.

    Args:
        name: First positional command-line argument, if any.
        variant: Template set to render.
        base_dir: Directory the component folder is created in. Defaults to
            the current working directory.

    Returns:
        Frozen :class:`Config` for this run.
    """
    if not name:
        raise InvalidInputError()

    return Config(
        name=name,
        base_dir=Path(base_dir) if base_dir is not None else Path.cwd(),
        variant=Variant(variant),
    )
