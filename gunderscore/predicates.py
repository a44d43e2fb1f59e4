import enum
import math
import numbers
import funcy as fn

from .decorators import export
from .exceptions import InvalidArgument


class Kind(enum.Enum):
    ''' The two container shapes collection functions know how to traverse '''
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'


# container -> Kind
@export()
def kind_of(container):
    ''' Classify a container once. Everything that is neither a sequence nor a
    mapping is rejected '''
    if fn.is_mapping(container):
        return Kind.MAPPING
    if fn.is_seq(container):
        return Kind.SEQUENCE
    raise InvalidArgument('Expected a sequence or a mapping, got {}'.format(type(container).__name__))


# a -> bool
@export()
def is_existential(value):
    return value is not None


# a -> bool
@export()
def is_truthy(value):
    ''' Anything but False and None. Notice that 0 and '' are truthy here '''
    return value is not False and is_existential(value)


# a -> bool
@export()
def is_function(value):
    return callable(value)


# a -> bool
@export()
def is_number(value):
    return (
        isinstance(value, numbers.Real) and
        not isinstance(value, bool) and
        not (isinstance(value, float) and math.isnan(value))
    )


# a -> bool
@export()
def is_string(value):
    return isinstance(value, str)


# a -> bool
@export()
def is_indexed(value):
    return fn.is_seq(value)


# a -> bool
@export()
def is_associative(value):
    return fn.is_mapping(value)


# a -> bool
@export()
def is_array(value):
    return fn.is_seqcoll(value)
