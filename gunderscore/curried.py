'''
Function first versions of the collection functions, curried so that they
can be partially applied and chained with 'pipeline':

    pipeline(records, where(dict(done=True)), select('name'))
'''
from . import collection as coll
from . import objects
from .functions import curry


each = curry(lambda func, collection: coll.each(collection, func))
map = curry(lambda func, collection: coll.map(collection, func))
filter = curry(lambda func, collection: coll.filter(collection, func))
reject = curry(lambda func, collection: coll.not_(collection, func))
find = curry(lambda func, collection: coll.find(collection, func))
where = curry(lambda criteria, collection: coll.where(collection, criteria))
select = curry(lambda key, collection: coll.select(collection, key))
all = curry(lambda func, collection: coll.all(collection, func))
any = curry(lambda func, collection: coll.any(collection, func))
reduce = curry(lambda func, seed, collection: coll.reduce(collection, func, seed))
mixin = curry(lambda x, y: objects.mixin(x, y))

pluck = select
