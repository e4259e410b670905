"""CLI interface."""
from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from storyanim.animation.animation_presets import is_full_bleed, preset_names, resolve_preset
from storyanim.animation.animation_types import Dimensions, PresetConfigurationError
from storyanim.animation.css_keyframes import descriptor_to_css, keyframes_name
from storyanim.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Resolve story animation presets into keyframes."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command("list")
def list_presets():
    """List available presets."""
    for name in preset_names():
        suffix = " (full-bleed)" if is_full_bleed(name) else ""
        typer.echo(f"{name}{suffix}")


@app.command()
def resolve(
    name: str = typer.Argument(..., help="Preset name, e.g. fly-in-left."),
    translate_x: Optional[float] = typer.Option(None, "--translate-x"),
    translate_y: Optional[float] = typer.Option(None, "--translate-y"),
    scale_start: Optional[float] = typer.Option(None, "--scale-start"),
    scale_end: Optional[float] = typer.Option(None, "--scale-end"),
    target_x: float = typer.Option(0.0, "--target-x"),
    target_y: float = typer.Option(0.0, "--target-y"),
    target_width: float = typer.Option(100.0, "--target-width"),
    target_height: float = typer.Option(100.0, "--target-height"),
    page_width: Optional[float] = typer.Option(None, "--page-width", help="Defaults to the configured page width."),
    page_height: Optional[float] = typer.Option(None, "--page-height", help="Defaults to the configured page height."),
    css: Optional[str] = typer.Option(None, "--css", help="Print CSS for this selector instead of JSON."),
):
    """Resolve a preset and print its concrete keyframes."""
    options = {
        "translateX": translate_x,
        "translateY": translate_y,
        "scaleStart": scale_start,
        "scaleEnd": scale_end,
    }
    try:
        descriptor = resolve_preset(name, {k: v for k, v in options.items() if v is not None})
    except PresetConfigurationError as exc:
        raise typer.BadParameter(str(exc))
    if descriptor is None:
        raise typer.BadParameter(f"Unknown preset: {name}")

    dimensions = Dimensions(
        target_x=target_x,
        target_y=target_y,
        target_width=target_width,
        target_height=target_height,
        page_width=page_width if page_width is not None else settings.default_page_width,
        page_height=page_height if page_height is not None else settings.default_page_height,
    )

    if css:
        try:
            output = descriptor_to_css(css, keyframes_name(settings.keyframes_prefix, name), descriptor, dimensions)
        except ValueError as exc:
            raise typer.BadParameter(str(exc))
        typer.echo(output)
        return

    result = {"name": name, "fullBleed": is_full_bleed(name), **descriptor.to_dict(dimensions)}
    typer.echo(json.dumps(result, indent=2))


if __name__ == "__main__":
    app()
