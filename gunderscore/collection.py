'''
Collection functions.

Everything here is built on 'each', which knows how to walk the two kinds of
container (sequences and mappings). Results are always new lists; the input
container is never modified.
'''
import builtins
import math
import funcy as fn

from . import defaults
from .decorators import export
from .exceptions import InvalidArgument
from .helpers import adapt, missing
from .predicates import Kind, kind_of


# container -> ((a, index) -> None) -> None
@export()
def each(collection, func):
    '''
    Call 'func' with (element, index) for every element of a sequence, or with
    (value, key) for every item of a mapping.

    Indices and keys are fixed before the first call: the length of a
    sequence is read once and the keys of a mapping are copied. A key that
    the callback removes before it is reached is skipped.
    '''
    kind = kind_of(collection)
    visit = adapt(func, 2)
    if kind is Kind.SEQUENCE:
        for i in range(len(collection)):
            visit(collection[i], i)
    else:
        for key in list(collection):
            if key in collection:
                visit(collection[key], key)


# container -> (a -> b) -> [b]
@export()
def map(collection, func):
    func = adapt(func, 1)
    result = []
    each(collection, lambda x: result.append(func(x)))
    return result


# container -> (a -> bool) -> [a]
@export()
def filter(collection, predicate):
    predicate = adapt(predicate, 1)
    result = []

    def keep(x):
        if predicate(x):
            result.append(x)

    each(collection, keep)
    return result


# container -> (a -> bool) -> [a]
@export('reject')
def not_(collection, predicate):
    ''' The opposite of 'filter' '''
    return filter(collection, fn.complement(adapt(predicate, 1)))


reject = not_


# container -> (a -> bool) -> a
@export()
def find(collection, predicate):
    return fn.first(filter(collection, predicate))


# container -> {str: a} -> [{str: a}]
@export()
def where(collection, criteria):
    ''' Records having every key of 'criteria' with an equal value '''
    if not fn.is_mapping(criteria):
        raise InvalidArgument('Criteria of "where" has to be a mapping')
    pairs = list(criteria.items())

    def matches(record):
        return fn.is_mapping(record) and builtins.all(
            key in record and record[key] == value for key, value in pairs
        )

    return filter(collection, matches)


# record -> key -> a
def lookup(record, key):
    if fn.is_mapping(record):
        return record.get(key)
    if fn.is_seq(record) and isinstance(key, int) and -len(record) <= key < len(record):
        return record[key]
    return None


# container -> key -> [a]
@export('pluck')
def select(collection, key):
    return map(collection, lambda record: lookup(record, key))


# container -> (a -> bool) -> bool
@export()
def all(collection, predicate):
    return len(filter(collection, predicate)) == len(collection)


# container -> (a -> bool) -> bool
@export()
def any(collection, predicate):
    return len(filter(collection, predicate)) > 0


# container -> ((b, a, index) -> b) -> b -> b
@export()
def reduce(collection, func, seed=missing):
    '''
    Left fold calling func(accumulator, element, index).

    Without a seed the first element becomes the accumulator and folding
    starts from the second one. An empty container without a seed has no
    result and raises InvalidArgument.
    '''
    func = adapt(func, 3)
    result = seed
    started = seed is not missing

    def step(element, index):
        nonlocal result, started
        if started:
            result = func(result, element, index)
        else:
            result, started = element, True

    each(collection, step)
    if not started:
        raise InvalidArgument('cannot reduce empty collection without seed')
    return result


# [a] -> [b] -> ... -> [(a, b, ...)]
@export()
def zip(*sequences):
    '''
    Tuples of the elements found at the same position in each sequence.

    The result is as long as the FIRST sequence. Positions past the end of a
    shorter sequence hold the 'zip_fill' option (None by default) and extra
    elements of longer sequences are dropped.
    '''
    for seq in sequences:
        if kind_of(seq) is not Kind.SEQUENCE:
            raise InvalidArgument('zip only takes sequences, got a mapping')
    if not sequences:
        return []
    fill = defaults.options['zip_fill']

    def column(i):
        return tuple(seq[i] if i < len(seq) else fill for seq in sequences)

    return map(range(len(sequences[0])), column)


# container -> a
@export()
def max(collection):
    return reduce(collection, lambda acc, x: x if x > acc else acc, -math.inf)


# container -> a
@export()
def min(collection):
    return reduce(collection, lambda acc, x: x if x < acc else acc, math.inf)
