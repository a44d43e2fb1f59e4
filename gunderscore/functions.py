import inspect
import threading
import wrapt
import funcy as fn
from collections import OrderedDict
from functools import wraps

from . import defaults
from .collection import reduce
from .decorators import export
from .exceptions import InvalidArgument
from .helpers import POSITIONAL, missing, required_args
from .logger import logger


# a -> a
@export()
def identity(value):
    ''' Returns the value it is passed. Handy wherever a function is expected
    but no transformation is wanted '''
    return value


# a -> (a -> b) -> (b -> c) -> ... -> z
@export()
def pipeline(seed, *funcs):
    ''' Feed 'seed' through 'funcs' from left to right '''
    return reduce(funcs, lambda acc, func: func(acc), seed)


# (a, b, ... -> z) -> int -> (a -> b -> ... -> z)
@export()
def curry(func, arity=None):
    '''
    Let 'func' take its positional arguments over several calls.

    Once 'arity' arguments have been gathered 'func' is called with all of
    them, in the order they were given. Until then every call returns a new
    function waiting for the rest. By default the arity is the number of
    positional parameters of 'func' without a default value.

    Args:
        func (callable):  Function to curry
        arity (int):      Needed when the signature of 'func' can't be read,
                          which is the case for some built-ins

    Keyword arguments are collected along the way. With an introspected
    arity they don't count towards it; with an explicit one they do.
    '''
    if not callable(func):
        raise InvalidArgument('Expected a callable, got {!r}'.format(func))
    if arity is None:
        arity = required_args(func)
        if arity is None:
            raise InvalidArgument(
                'Cannot read the arity of {!r}, pass it explicitly'.format(func))
        params = list(inspect.signature(func).parameters.values())
        autocurried = fn.autocurry(func)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise InvalidArgument('Arity has to be a non-negative int, got {!r}'.format(arity))
    else:
        params = [inspect.Parameter('arg{}'.format(i), inspect.Parameter.POSITIONAL_ONLY)
                  for i in range(arity)]
        autocurried = fn.autocurry(func, n=arity)
    return curried(autocurried, params)


# [Parameter] -> tuple -> dict -> [Parameter]
def remaining(params, args, kwargs):
    skip = len(args)
    result = []
    for param in params:
        if param.kind in POSITIONAL and skip:
            skip -= 1
        elif param.name not in kwargs:
            result.append(param)
    return result


def curried(autocurried, params):
    ''' Wrap a funcy autocurried function so that its signature lists only the
    parameters still missing. Callers that trim arguments to the signature,
    like 'each' and 'reduce', then pass a partial the right number of them '''
    @wraps(autocurried)
    def wrapper(*args, **kwargs):
        result = autocurried(*args, **kwargs)
        # funcy answers a partial application with another autocurried closure
        if getattr(result, '__code__', None) is autocurried.__code__:
            left = remaining(params, args, kwargs)
            logger.debug('%s is waiting for %s', wrapper.__name__,
                         ', '.join(p.name for p in left))
            return curried(result, left)
        return result
    wrapper.__signature__ = inspect.Signature(params)
    return wrapper


# tuple -> dict -> str
def cache_key(args, kwargs):
    ''' Notice that 1 and '1' give the same key '''
    return ','.join(
        [str(arg) for arg in args] +
        ['{}={}'.format(key, kwargs[key]) for key in sorted(kwargs)]
    )


# (a -> b) -> int -> (a -> b)
@export()
def memoize(func, maxsize=missing):
    '''
    Cache the results of 'func' keyed by the text of its arguments.

    Args:
        func (callable):  Function to memoize
        maxsize (int):    Number of results to keep, least recently used go
                          first. None keeps everything. Defaults to the
                          'memoize_maxsize' option

    The cache belongs to the returned function alone.
    '''
    if not callable(func):
        raise InvalidArgument('Expected a callable, got {!r}'.format(func))
    if maxsize is missing:
        maxsize = defaults.options['memoize_maxsize']
    else:
        defaults.validate_option('memoize_maxsize', maxsize)

    name = getattr(func, '__name__', repr(func))
    cache = OrderedDict()
    lock = threading.Lock()

    @wrapt.decorator
    def memoized(wrapped, instance, args, kwargs):
        key = cache_key(args, kwargs)
        if instance is not None:
            key = '{}:{}'.format(id(instance), key)
        with lock:
            if key in cache:
                cache.move_to_end(key)
                logger.debug('cache hit for %s(%s)', name, key)
                return cache[key]
        result = wrapped(*args, **kwargs)
        with lock:
            cache[key] = result
            if maxsize is not None and len(cache) > maxsize:
                evicted, _ = cache.popitem(last=False)
                logger.debug('evicted %s(%s)', name, evicted)
        return result

    return memoized(func)
