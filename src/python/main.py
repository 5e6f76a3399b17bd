#!/usr/bin/env python3
"""
===============================================================================
ACCELMAGIQ - DEMONSTRATION ENTRY POINT
===============================================================================
Walks a quaternion through the whole library and prints each intermediate
value, one line per value, the way a telemetry link would stream them:

    q1  = quat_from(config quaternion)
    q1n = normalize(q1), its conjugate
    q2  = q1n * q1n
    diff(q1n, q2), diff(q2, q1n)
    rotation angles a1, a2
    Euler angles of q1n and whole-degree R / P / Y / A

USAGE:
    python main.py                          # Use config/demo_config.yaml
    python main.py --config my.yaml         # Alternate configuration
    python main.py --quaternion 1 0 0 1     # Override the input quaternion
    python main.py --log-level DEBUG        # Show fallback diagnostics

DEPENDENCIES:
    numpy, pyyaml
    Install: pip install -e .
===============================================================================
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import yaml

# ---------------------------------------------------------------------------
# Path setup: ensure the package is importable without installation
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from accelmagiq import (
    AngleRPY, angle, conjugate, diff, int_deg, multiply, normalize,
    quat_as_array, quat_from, quat_rotation_angle, rpy_as_array,
    rpy_from_quat,
)

DEFAULT_CONFIG_PATH = PROJECT_ROOT.parent.parent / 'config' / 'demo_config.yaml'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

logger = logging.getLogger('ACCELMAGIQ_MAIN')

ReportValue = Union[float, int, np.ndarray]


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the demonstration run.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional path of a log file written alongside stdout
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load the demonstration configuration from a YAML file.

    Args:
        config_path: Path to YAML config. Defaults to config/demo_config.yaml

    Returns:
        Dictionary of configuration parameters

    Raises:
        ValueError: If the file is not a mapping with a demo.quaternion entry
    """
    if config_path is None:
        config_path = str(DEFAULT_CONFIG_PATH)

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: top level must be a mapping, "
                         f"got {type(config).__name__}")

    demo = config.get('demo') or {}
    if not isinstance(demo, dict):
        raise ValueError(f"{config_path}: 'demo' must be a mapping, "
                         f"got {type(demo).__name__}")
    if 'quaternion' not in demo:
        raise ValueError(f"{config_path}: missing 'demo.quaternion' entry")

    demo.setdefault('decimals', 4)
    config['demo'] = demo
    config.setdefault('logging', {})
    return config


def run_demo(q_input: Sequence[float]) -> List[Tuple[str, ReportValue]]:
    """
    Run the quaternion walkthrough.

    Args:
        q_input: Input quaternion [w, x, y, z]. A malformed sequence falls
            back to the identity quaternion, as the library does.

    Returns:
        Ordered (label, value) report lines
    """
    report = []

    q1 = quat_from(q_input)
    report.append(('q1', quat_as_array(q1)))

    q1 = normalize(q1)
    report.append(('q1n', quat_as_array(q1)))
    report.append(('q1n*', quat_as_array(conjugate(q1))))

    q2 = multiply(q1, q1)
    report.append(('q2', quat_as_array(q2)))
    report.append(('d12', quat_as_array(diff(q1, q2))))
    report.append(('d21', quat_as_array(diff(q2, q1))))

    report.append(('a1', quat_rotation_angle(q1)))
    report.append(('a2', quat_rotation_angle(q2)))

    angles = rpy_from_quat(q1)
    report.append(('rpy', rpy_as_array(angles)))
    report.append(('R', int_deg(angle(angles, AngleRPY.ROLL))))
    report.append(('P', int_deg(angle(angles, AngleRPY.PITCH))))
    report.append(('Y', int_deg(angle(angles, AngleRPY.YAW))))
    report.append(('A', int_deg(angle(angles, AngleRPY.AZIMUTH))))

    logger.debug(f"Demo produced {len(report)} report lines")
    return report


def format_report(report: Sequence[Tuple[str, ReportValue]],
                  decimals: int = 4) -> List[str]:
    """
    Render report lines as 'label: v1,v2,...'.

    Integers are printed as-is; floats and arrays use a fixed number of
    decimals.
    """
    lines = []
    for label, value in report:
        if isinstance(value, (int, np.integer)):
            text = str(int(value))
        else:
            values = np.atleast_1d(np.asarray(value, dtype=np.float64))
            text = ','.join(f"{v:.{decimals}f}" for v in values)
        lines.append(f"{label}: {text}")
    return lines


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='AccelMagiQ quaternion / Euler angle walkthrough')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--quaternion', type=float, nargs='+', default=None,
                        metavar='C',
                        help='Override the input quaternion components (w x y z)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides the config file)')
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        setup_logging(args.log_level or 'INFO')
        logger.error(f"Configuration error: {exc}")
        return 1

    log_cfg = config['logging']
    setup_logging(args.log_level or log_cfg.get('level') or 'INFO',
                  log_cfg.get('file'))

    q_input = args.quaternion if args.quaternion is not None \
        else config['demo']['quaternion']
    logger.info(f"Input quaternion: {q_input}")

    report = run_demo(q_input)
    for line in format_report(report, config['demo']['decimals']):
        print(line)

    return 0


if __name__ == '__main__':
    sys.exit(main())
