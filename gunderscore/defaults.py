import os
import funcy as fn
from contextlib import contextmanager

from .exceptions import InvalidArgument
from .logger import logger, set_level


log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


# () -> str
def env_log_level():
    ''' Level asked for in GUNDERSCORE_LOG_LEVEL, or WARNING when it is unset or
    not a level name '''
    level = os.getenv('GUNDERSCORE_LOG_LEVEL', 'WARNING').upper()
    if level not in log_levels:
        logger.warning('Ignoring GUNDERSCORE_LOG_LEVEL=%s, expected one of %s', level, log_levels)
        return 'WARNING'
    return level


# Options and their default values. They are read at call time, so changing
# them through 'configure' or 'scoped' affects every later call.
options = dict(
    # Default bound of the cache created by 'memoize'. None means the cache
    # grows for as long as the memoized function is alive.
    memoize_maxsize = None,
    # Value placed in the tuples produced by 'zip' at positions past the end
    # of a sequence that is shorter than the first one.
    zip_fill = None,
    # Level of the package logger.
    log_level = env_log_level(),
    # Log every call to an exported function at DEBUG level.
    trace_calls = False,
)


# str -> a -> None
def validate_option(name, value):
    if name not in options:
        raise InvalidArgument('Option "{}" is not recognized'.format(name))
    if name == 'memoize_maxsize':
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
            raise InvalidArgument('Option "memoize_maxsize" has to be None or a positive int')
    elif name == 'log_level':
        if not isinstance(value, str) or value.upper() not in log_levels:
            raise InvalidArgument('Option "log_level" has to be one of {}'.format(log_levels))
    elif name == 'trace_calls':
        if not isinstance(value, bool):
            raise InvalidArgument('Option "trace_calls" has to be a bool')


# a -> a
def normalize_option(name, value):
    return value.upper() if name == 'log_level' else value


def apply(overrides):
    for name, value in overrides.items():
        options[name] = normalize_option(name, value)
    if 'log_level' in overrides:
        set_level(options['log_level'])


def configure(**overrides):
    ''' Validate and permanently apply option overrides. Returns the resulting
    options '''
    for name, value in overrides.items():
        validate_option(name, value)
    apply(overrides)
    logger.debug('configured %s', overrides)
    return dict(options)


@contextmanager
def scoped(**overrides):
    ''' Change options for the duration of this context. Then restore the old
    values '''
    for name, value in overrides.items():
        validate_option(name, value)
    saved = fn.project(options, overrides.keys())
    apply(overrides)
    try:
        yield options
    finally:
        apply(saved)


set_level(options['log_level'])
