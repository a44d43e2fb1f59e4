import wrapt

from . import defaults
from .exceptions import GunderscoreError
from .logger import logger


# Every exported function, by the name it is published under.
functions = {}


@wrapt.decorator
def traced(wrapped, instance, args, kwargs):
    if defaults.options['trace_calls']:
        logger.debug('%s(%s)', wrapped.__name__, ', '.join(
            [repr(arg) for arg in args] +
            ['{}={!r}'.format(key, val) for key, val in kwargs.items()]
        ))
    return wrapped(*args, **kwargs)


def export(*aliases):
    ''' Publish a function in the package namespace under its own name and any
    extra aliases '''
    def wrapper(wrapped):
        wrapped = traced(wrapped)
        for name in (wrapped.__name__,) + aliases:
            if name in functions:
                raise GunderscoreError('"{}" is exported twice'.format(name))
            functions[name] = wrapped
        return wrapped
    return wrapper
