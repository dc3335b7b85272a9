"""swipe-gestures CLI.

Usage:
    swipe-gestures classify --dx=-20 --dy=2 --vx=-0.8 --vy=0.05
    swipe-gestures classify --dx=40 --dy=3 --vx=0.6 --vy=0 --set detectSwipeRight=false
    swipe-gestures config --config swipe.yml --output effective.yml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

try:
    import typer
except ImportError:
    raise ImportError("typer is required for CLI. Install with: pip install typer")
import yaml

from swipe_gestures.config import CONFIG_KEYS, SwipeConfig, load_config, resolve_config, save_config
from swipe_gestures.recognizer import GestureRecognizer
from swipe_gestures.state import GestureState, TouchEvent

app = typer.Typer(
    name="swipe-gestures",
    help="Classify pan gestures into swipe directions.",
    add_completion=False,
)


def _setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _parse_overrides(pairs: Optional[List[str]]) -> dict:
    """Parse KEY=VALUE pairs; values are YAML scalars (true, 0.5, 80)."""
    overrides = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            typer.echo(f"Invalid --set value '{pair}', expected KEY=VALUE", err=True)
            raise typer.Exit(2)
        overrides[key.strip()] = yaml.safe_load(raw)
    return overrides


def _effective_config(config_path: Optional[str], pairs: Optional[List[str]]) -> SwipeConfig:
    """Resolve a config file (if any) plus --set overrides against the defaults."""
    overrides = {}
    if config_path:
        path = Path(config_path)
        if not path.is_file():
            typer.echo(f"Config file not found: {config_path}", err=True)
            raise typer.Exit(1)
        overrides.update(load_config(path).overrides())

    for key, value in _parse_overrides(pairs).items():
        # --set accepts field names too; store under the camelCase key so it
        # replaces any value from the file
        overrides[CONFIG_KEYS.get(key, key)] = value

    config = resolve_config(overrides)
    _check_types(config)
    return config


def _check_types(config: SwipeConfig):
    """Reject thresholds that are not numbers and flags that are not booleans."""
    for name, value in config.to_dict().items():
        if name.startswith("detect"):
            ok = isinstance(value, bool)
            expected = "true or false"
        else:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
            expected = "a number"
        if not ok:
            typer.echo(f"Invalid value for {name}: {value!r} (expected {expected})", err=True)
            raise typer.Exit(2)


@app.command()
def classify(
    dx: float = typer.Option(..., help="Cumulative x displacement"),
    dy: float = typer.Option(..., help="Cumulative y displacement"),
    vx: float = typer.Option(..., help="Velocity on x"),
    vy: float = typer.Option(..., help="Velocity on y"),
    touches: int = typer.Option(1, help="Number of active touches"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to a swipe config YAML file"),
    set_: Optional[List[str]] = typer.Option(None, "--set", help="Override KEY=VALUE (repeatable)"),
    log_level: str = typer.Option("warning", help="Log level"),
):
    """Run one gesture through the claim check and release handler."""
    _setup_logging(log_level)
    effective = _effective_config(config, set_)

    recognizer = GestureRecognizer(config=effective.to_dict())
    handlers = recognizer.pan_handlers
    event = TouchEvent(touches=[None] * touches)
    state = GestureState(dx=dx, dy=dy, vx=vx, vy=vy, touch_count=touches)

    claimed = handlers.on_start_should_set_responder(event, state)
    direction = None
    if claimed:
        direction = handlers.on_responder_release(event, state)

    typer.echo(f"claim: {'yes' if claimed else 'no'}")
    typer.echo(f"direction: {direction.value if direction else 'none'}")


@app.command("config")
def show_config(
    config: Optional[str] = typer.Option(None, "--config", help="Path to a swipe config YAML file"),
    set_: Optional[List[str]] = typer.Option(None, "--set", help="Override KEY=VALUE (repeatable)"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Save the effective config here"),
    log_level: str = typer.Option("warning", help="Log level"),
):
    """Print the effective configuration as YAML."""
    _setup_logging(log_level)
    effective = _effective_config(config, set_)

    typer.echo(yaml.dump({"swipe": effective.to_dict()}, default_flow_style=False, sort_keys=False), nl=False)

    if output:
        save_config(effective, output)
        typer.echo(f"Saved to: {output}")


def main():
    app()


if __name__ == "__main__":
    main()
