"""Custom argparse Action classes for the sidenotes CLI.

These actions take their defaults from ``SIDENOTES_<DEST>`` environment
variables. Arguments given on the command line always win.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os

from sidenotes.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

TRUE_VALUES = ('true', '1', 'yes', 'on')


def _dest_from_options(option_strings, dest=None):
    """Derive the argparse dest from option strings like '--html-parser'."""
    if dest:
        return dest
    for option in option_strings:
        if option.startswith('--'):
            return option[2:].replace('-', '_')
    for option in option_strings:
        if option.startswith('-'):
            return option[1:]
    return None


def env_key_for(dest):
    """Return the environment variable consulted for ``dest``."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


class DynamicVersionAction(argparse._VersionAction):
    """Action that displays version information from a callback."""

    def __init__(self, option_strings, version_callback=None, **kwargs):
        self.version_callback = version_callback
        kwargs.setdefault('version', "placeholder")
        kwargs.setdefault('dest', argparse.SUPPRESS)
        kwargs.setdefault('default', argparse.SUPPRESS)
        super().__init__(option_strings, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Display version and exit."""
        version = self.version
        if self.version_callback:
            version = self.version_callback()
        parser.exit(message=f"{version}\n")


class EnvironmentAwareAction(argparse.Action):
    """Store action that supports environment variable defaults."""

    def __init__(self, option_strings, *args, **kwargs):
        dest = _dest_from_options(option_strings, kwargs.get('dest'))
        if dest:
            env_key = env_key_for(dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                try:
                    converted_value = self._convert_env_value(env_value, kwargs)
                    kwargs['default'] = converted_value
                except (ValueError, TypeError) as e:
                    logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(option_strings, *args, **kwargs)

    @staticmethod
    def _convert_env_value(env_value, kwargs):
        """Convert an environment variable string using the argument's type and choices."""
        converter = kwargs.get('type')
        value = converter(env_value) if converter is not None else env_value
        choices = kwargs.get('choices')
        if choices is not None and value not in choices:
            raise ValueError(f"expected one of {', '.join(map(str, choices))}")
        return value

    def __call__(self, parser, namespace, values, option_string=None):
        """Standard action processing."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean action that supports environment variable defaults."""

    def __init__(self, option_strings, *args, **kwargs):
        dest = _dest_from_options(option_strings, kwargs.get('dest'))
        if dest:
            env_value = os.environ.get(env_key_for(dest))
            if env_value is not None:
                kwargs['default'] = env_value.lower() in TRUE_VALUES

        super().__init__(option_strings, *args, **kwargs)


def create_env_aware_argument(parser, *args, **kwargs):
    """Add an argument with environment variable support.

    The environment-aware action is chosen from the requested ``action``.
    """
    action = kwargs.get('action', 'store')

    if action == 'store_true':
        kwargs['action'] = EnvironmentAwareBooleanAction
    elif action in ('store', None):
        kwargs['action'] = EnvironmentAwareAction

    return parser.add_argument(*args, **kwargs)
