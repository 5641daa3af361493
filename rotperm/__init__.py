from .permutation import Permutation
from .group import Group, CyclicGroup
from .tally import CycleTally
