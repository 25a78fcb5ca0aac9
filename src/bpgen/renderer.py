"""Render component boilerplate from the packaged Jinja2 templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jinja2 import Environment, PackageLoader, StrictUndefined

from bpgen.config import Variant

# Output is TypeScript/JavaScript, not HTML: no autoescaping.
_env = Environment(
    loader=PackageLoader("bpgen", "templates"),
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


@dataclass(frozen=True)
class RenderContext:
    name: str
    class_token: Optional[str] = None


@dataclass(frozen=True)
class RenderedFiles:
    component: str
    styles: str


def _render(variant: Variant, filename: str, context: RenderContext) -> str:
    if variant.uses_class_token and not context.class_token:
        raise ValueError(f"Variant '{variant.value}' requires a class token")

    template = _env.get_template(f"{variant.template_dir}/{filename}")
    return template.render(name=context.name, class_token=context.class_token)


def render_component(variant: Variant, context: RenderContext) -> str:
    """Render the component source file."""
    return _render(variant, f"component.{variant.component_ext}.j2", context)


def render_styles(variant: Variant, context: RenderContext) -> str:
    """Render the companion styles module."""
    return _render(variant, f"styles.{variant.styles_ext}.j2", context)


def render_files(variant: Variant, context: RenderContext) -> RenderedFiles:
    """Render both files from one context.

    Both renders see the same ``context``, so a ``scoped`` class token is
    shared between the component and its styles.
    """
    return RenderedFiles(
        component=render_component(variant, context),
        styles=render_styles(variant, context),
    )
