"""
Pipelines - declarative filter/transform/collect over in-memory lists.

- streams: filter, map and sort with comprehensions and built-ins
- parallel: the same map run sequentially and on a thread pool
"""
