from data_either.either import Either, Left, Right, Semigroup, Tag, lift_a2
from data_either.utils import lefts, partition, rights, sequence, traverse

__all__ = [
    "Either",
    "Left",
    "Right",
    "Semigroup",
    "Tag",
    "lift_a2",
    "lefts",
    "partition",
    "rights",
    "sequence",
    "traverse",
]
