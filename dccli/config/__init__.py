"""Configuration package exports."""

from .loader import build_parser, parse_args
from .model import SessionConfig

__all__ = ["SessionConfig", "build_parser", "parse_args"]
