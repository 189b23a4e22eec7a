"""
Command-line entry point.

    diffgraph --config survey.yaml
    diffgraph --input SurveyData-Q6.csv --question 2 --dot q3.dot --no-show
"""

import argparse
import logging
from typing import List, Optional

from diffgraph import ConfigError
from diffgraph.backends import DotMode, render_graph, save_dot_file
from diffgraph.config import VisualizerConfig, config_to_yaml, load_config
from diffgraph.logging_config import setup_logging
from diffgraph.pipeline import build_visualization


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_DATA = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='diffgraph',
        description='Draw survey respondents as a graph weighted by answer differences',
    )
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--input', dest='input_path', help='Survey CSV (overrides config)')
    parser.add_argument('--question', dest='question_index', type=int,
                        help='0-based question index (overrides config)')
    parser.add_argument('--dot', help='Write Graphviz DOT to this file')
    parser.add_argument('--pinned', action='store_true',
                        help='Pin DOT nodes to the circular layout (render with neato -n)')
    parser.add_argument('--png', help='Save the rendered graph to this image file')
    parser.add_argument('--no-show', action='store_true', help='Do not open a window')
    parser.add_argument('--print-config', action='store_true',
                        help='Print the effective configuration as YAML and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def _resolve_config(args: argparse.Namespace) -> VisualizerConfig:
    config = load_config(args.config) if args.config else VisualizerConfig()
    if args.input_path is not None:
        config.input_path = args.input_path
    if args.question_index is not None:
        config.question_index = args.question_index
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = _resolve_config(args)
        if args.print_config:
            print(config_to_yaml(config), end='')
            return EXIT_OK
        graph = build_visualization(config)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR

    if graph is None:
        return EXIT_NO_DATA

    if args.dot:
        mode = DotMode.PINNED if args.pinned else DotMode.SIMPLE
        save_dot_file(graph, args.dot, mode=mode, node_radius=config.node_radius)
        logger.info("Saved DOT graph to %s", args.dot)

    if args.png or not args.no_show:
        render_graph(
            graph,
            width=config.canvas_width,
            height=config.canvas_height,
            node_radius=config.node_radius,
            title=config.title,
            output_path=args.png,
            show=not args.no_show,
        )

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
