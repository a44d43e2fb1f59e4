import copy
import funcy as fn

from .collection import each, map
from .decorators import export
from .exceptions import InvalidArgument
from .predicates import Kind, kind_of


# container -> [key]
@export()
def keys(collection):
    ''' Indices of a sequence or keys of a mapping, in the order 'each' visits
    them '''
    result = []
    each(collection, lambda _, key: result.append(key))
    return result


# container -> [a]
@export('values')
def vals(collection):
    return map(collection, fn.identity)


# container -> container
@export()
def clone(collection):
    ''' Shallow copy, of the same type as the original when that type can be
    copied, otherwise a dict or a list '''
    kind = kind_of(collection)
    try:
        return copy.copy(collection)
    except TypeError:
        # Read-only views like MappingProxyType can't be copied
        return dict(collection) if kind is Kind.MAPPING else list(collection)


# {k: a} -> {k: a} -> ... -> {k: a}
@export()
def mixin(*objs):
    ''' Union of all the mappings. Later mappings win on shared keys and none
    of them is modified '''
    for obj in objs:
        if not fn.is_mapping(obj):
            raise InvalidArgument('mixin only takes mappings, got {}'.format(type(obj).__name__))
    return fn.merge({}, *objs)


# container -> [a]
@export()
def to_array(collection):
    return vals(collection)
