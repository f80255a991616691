from .key import Keyed, identity, key_of
from .tree.bstree import BSTree, BSTreeNode, Link
from .exception import KeyBSTError, OrderViolationError
