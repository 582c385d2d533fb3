# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
from argparse import ArgumentParser
from collections import OrderedDict
from datetime import datetime
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Any, NamedTuple

import configargparse
import structlog
from typing_extensions import assert_never

if TYPE_CHECKING:
    from shared_types.wire_types import WireType


def create_parser(*, prefix: str | None = None, add_help: bool = True) -> ArgumentParser:
    return configargparse.ArgumentParser(auto_env_var_prefix=prefix or 'shared_types_', add_help=add_help)


# docs at http://www.structlog.org/en/stable/api.html#structlog.dev.ConsoleRenderer
class ConsoleRenderer(structlog.dev.ConsoleRenderer):
    """ Renders `[level] event key=value ...`, with keys sorted and colors from colorama.
    """

    @staticmethod
    def get_default_level_styles(colors=True):
        import colorama
        if not colors:
            return structlog.dev.ConsoleRenderer.get_default_level_styles(False)
        return {
            'critical': colorama.Style.BRIGHT + colorama.Fore.RED,
            'exception': colorama.Fore.RED,
            'error': colorama.Fore.RED,
            'warn': colorama.Fore.YELLOW,
            'warning': colorama.Fore.YELLOW,
            'info': colorama.Fore.GREEN,
            'debug': colorama.Style.BRIGHT + colorama.Fore.CYAN,
            'notset': colorama.Back.RED,
        }

    def _repr(self, val):
        if isinstance(val, datetime):
            return str(val)
        else:
            return super()._repr(val)


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def process_logging_output(argv: list[str]) -> LoggingOutput:
    """Extract logging output before argv parsing."""
    parser = create_parser(add_help=False)

    log_args = parser.add_mutually_exclusive_group()
    log_args.add_argument('--json-logs', action='store_true')
    log_args.add_argument('--disable-logs', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    if args.json_logs:
        return LoggingOutput.JSON

    if args.disable_logs:
        return LoggingOutput.NULL

    return LoggingOutput.PRETTY


def process_logging_options(argv: list[str]) -> LoggingOptions:
    """Extract logging-specific options that are processed before argv parsing."""
    parser = create_parser(add_help=False)
    parser.add_argument('--debug', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    return LoggingOptions(debug=args.debug)


def setup_logging(*, logging_output: LoggingOutput, logging_options: LoggingOptions) -> None:
    """ Configure structlog to go through the stdlib logging module, with the selected output.

    Logs always go to stderr, stdout is reserved for the output of the commands.
    """
    import logging.config

    # common timestamper for structlog loggers and foreign (stdlib) loggers
    timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

    # processors for foreign loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            handlers = ['null']
        case LoggingOutput.PRETTY:
            handlers = ['pretty']
        case LoggingOutput.JSON:
            handlers = ['json']
        case _:
            assert_never(logging_output)

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'colored': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': ConsoleRenderer(colors=True),
                'foreign_pre_chain': pre_chain,
            },
            'json': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': structlog.processors.JSONRenderer(),
                'foreign_pre_chain': pre_chain,
            },
        },
        'handlers': {
            'pretty': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'colored',
            },
            'json': {
                'level': 'DEBUG',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'json',
            },
            'null': {
                'class': 'logging.NullHandler',
            },
        },
        'loggers': {
            '': {
                'handlers': handlers,
                'level': 'DEBUG' if logging_options.debug else 'INFO',
            },
        }
    })

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def check_or_exit(condition: bool, message: str) -> None:
    """Will exit printing `message` to stderr if `condition` is False."""
    if not condition:
        print(message, file=sys.stderr)
        sys.exit(2)


def import_shape(path: str) -> 'WireType[Any]':
    """ Import the shape given as `module:name` and build its wire type.

    The name may point to a record class, a variant root or any annotation object, like an alias to `list[u8]`.
    """
    import importlib

    from shared_types.wire_types import make_wire_type

    module_name, sep, attr_name = path.partition(':')
    check_or_exit(bool(sep and module_name and attr_name), f'invalid shape {path!r}, expected module:name')
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f'cannot import {module_name!r}: {e}', file=sys.stderr)
        sys.exit(2)
    shape = getattr(module, attr_name, None)
    check_or_exit(shape is not None, f'module {module_name!r} has no attribute {attr_name!r}')
    return make_wire_type(shape)


def add_format_argument(parser: ArgumentParser) -> None:
    from shared_types.serialization.formats import WIRE_FORMATS
    parser.add_argument('--format', choices=sorted(WIRE_FORMATS), default='bincode',
                        help='Wire format of the bytes (default: bincode)')
