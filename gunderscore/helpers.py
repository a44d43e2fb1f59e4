import inspect

from .exceptions import InvalidArgument


POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


# callable -> int | None
def accepted_args(func):
    ''' How many positional arguments can 'func' take? None means there is no
    limit, either because of *args or because the signature is unreadable '''
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return None
    if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
        return None
    return len([p for p in params if p.kind in POSITIONAL])


# callable -> int | None
def required_args(func):
    ''' Number of positional parameters without a default value '''
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return None
    return len([p for p in params if p.kind in POSITIONAL and p.default is p.empty])


# callable -> int -> callable
def adapt(func, nargs):
    '''
    Make a callback that can be called with 'nargs' positional arguments and
    forwards only as many of them as 'func' accepts.

    Collection operations call their callbacks with (element, index) or
    (accumulator, element, index). Callbacks are free to declare fewer
    parameters and simply ignore the trailing ones.
    '''
    if not callable(func):
        raise InvalidArgument('Expected a callable, got {!r}'.format(func))
    accepted = accepted_args(func)
    if accepted is None or accepted >= nargs:
        return func
    return lambda *args: func(*args[:accepted])


# Stands for an omitted optional argument where None is a meaningful value.
missing = object()
