"""
Visualizer configuration.

Replaces hard-coded paths and constants with one explicit struct that can be
read from (and written to) YAML via an intermediate dict representation.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from diffgraph import ConfigError
from diffgraph.csv_loader import MISSING_DROP, MISSING_POLICIES


DEFAULT_INPUT_PATH = "SurveyData-Q6.csv"
DEFAULT_TITLE = "Survey Difference Graph"


def _check_type(name: str, value: Any, expected) -> None:
    # bool is an int subclass, but `question_index: true` is not question 1
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ConfigError(f"{name} has invalid type {type(value).__name__}: {value!r}")


@dataclass
class VisualizerConfig:
    """
    Everything one run needs besides the data itself.

    Properties:
        input_path: Survey CSV to read
        question_index: 0-based question whose matrix is drawn
        canvas_width, canvas_height: Canvas size in pixels
        node_radius: Radius of each respondent circle
        layout_radius: Radius of the circle the nodes sit on
        missing: Loader policy for non-integer tokens ("drop" or "mark")
        title: Window / figure title
    """

    input_path: str = DEFAULT_INPUT_PATH
    question_index: int = 0
    canvas_width: int = 1200
    canvas_height: int = 700
    node_radius: float = 20
    layout_radius: float = 300
    missing: str = MISSING_DROP
    title: str = DEFAULT_TITLE

    @property
    def center(self) -> Tuple[float, float]:
        return (self.canvas_width / 2, self.canvas_height / 2)

    def validate(self) -> None:
        """
        Check field types and values.

        Raises:
            ConfigError: On the first invalid field
        """
        _check_type("input_path", self.input_path, str)
        _check_type("question_index", self.question_index, int)
        _check_type("canvas_width", self.canvas_width, int)
        _check_type("canvas_height", self.canvas_height, int)
        _check_type("node_radius", self.node_radius, (int, float))
        _check_type("layout_radius", self.layout_radius, (int, float))
        _check_type("missing", self.missing, str)
        _check_type("title", self.title, str)

        if not self.input_path:
            raise ConfigError("input_path must not be empty")
        if self.question_index < 0:
            raise ConfigError(f"question_index must be >= 0, got {self.question_index}")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigError(
                f"Canvas size must be positive, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.node_radius <= 0:
            raise ConfigError(f"node_radius must be positive, got {self.node_radius}")
        if self.layout_radius <= 0:
            raise ConfigError(f"layout_radius must be positive, got {self.layout_radius}")
        if self.missing not in MISSING_POLICIES:
            raise ConfigError(f"missing must be one of {MISSING_POLICIES}, got {self.missing!r}")


def config_to_dict(config: VisualizerConfig) -> Dict[str, Any]:
    return {f.name: getattr(config, f.name) for f in fields(config)}


def config_from_dict(d: Dict[str, Any]) -> VisualizerConfig:
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(VisualizerConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {unknown}")

    config = VisualizerConfig(**d)
    config.validate()
    return config


def config_to_yaml(config: VisualizerConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(s: str) -> VisualizerConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")
    return config_from_dict(d)


def load_config(filepath: Union[str, Path]) -> VisualizerConfig:
    """
    Read a YAML configuration file.

    Relative input paths are resolved against the configuration file's
    directory.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    path = Path(filepath)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}")

    config = config_from_yaml(content)

    input_path = Path(config.input_path)
    if not input_path.is_absolute():
        config.input_path = str(path.parent / input_path)

    return config
