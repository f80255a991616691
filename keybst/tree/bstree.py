from .. import log
from ..key import key_of
from ..exception import OrderViolationError

def _subtree_repr(x):
    """Renders the subtree rooted at x (None for an empty one) without
    recursing, so degenerate trees of any height can be printed."""
    parts = []
    stack = [x]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif item is None:
            parts.append('None')
        else:
            parts.append('{0}({1!r}, '.format(type(item).__name__, item.data))
            stack.extend((')', item.right.node, ', ', item.left.node))
    return ''.join(parts)


class Link(object):
    """A slot that is either empty or owns exactly one node.

    The tree root and both children of every node are links, so an
    operation can hand out the slot a key lives in and move nodes in and
    out of it."""

    def __init__(self, node=None):
        self.node = node

    def is_empty(self):
        return self.node is None

    def take(self):
        """Empties the link and returns the node it held (or None)."""
        node = self.node
        self.node = None
        return node

    def __repr__(self):
        return _subtree_repr(self.node)


class BSTreeNode(object):
    """A node of an unbalanced binary search tree."""

    def __init__(self, data):
        self.data = data

        self.left = Link()
        self.right = Link()

    def __repr__(self):
        return _subtree_repr(self)


class BSTree(object):
    """An unbalanced binary search tree with map-like (upsert) semantics.

    Values are ordered by their key: key(value) if a key function is given,
    otherwise value.key() for Keyed records and the value itself for
    everything else. Not thread-safe."""

    def __init__(self, key=None, node_type=BSTreeNode):
        self.node_type = node_type
        self.key = key if key is not None else key_of
        self.root = Link()

    def __repr__(self):
        return 'BSTree({0})'.format(_subtree_repr(self.root.node))

    def __contains__(self, k):
        return self.contains(k)

    def is_empty(self):
        return self.root.is_empty()

    def contains(self, k):
        return self.find(k) is not None

    def _locate(self, k):
        """Returns the link holding the node with key k, or the empty link
        where such a node belongs.

        Time complexity: O(h), O(n) in the worst case"""
        link = self.root
        while link.node is not None:
            x = link.node
            xk = self.key(x.data)
            if k < xk:
                link = x.left
            elif k > xk:
                link = x.right
            else:
                break
        return link

    def find(self, k):
        """Finds the node with key k. Returns None if k is not found.

        The stored value is the node's data attribute; it may be read,
        modified or reassigned as long as its key stays the same.

        Time complexity: O(h)"""
        return self._locate(k).node

    def get(self, k, default=None):
        x = self.find(k)
        return x.data if x is not None else default

    def insert(self, v):
        """Inserts value v. If a value with the same key is already stored
        it is replaced by v, the node keeps its position.

        Returns the node holding v.
        Time complexity: O(h)"""
        k = self.key(v)
        link = self._locate(k)
        if link.node is None:
            link.node = self.node_type(v)
            log.debug3("bstree: inserted key ", repr(k))
        else:
            link.node.data = v
            log.debug3("bstree: replaced value for key ", repr(k))
        return link.node

    def delete(self, k):
        """Deletes the value with key k. Does nothing if k is not found.

        A node with two children takes over the data of its in-order
        successor, and the successor node is unlinked in its place.

        Returns the deleted value, or None.
        Time complexity: O(h)"""
        link = self._locate(k)
        x = link.take()
        if x is None:
            return None

        if x.right.is_empty():
            link.node = x.left.take()
            log.debug3("bstree: deleted key ", repr(k))
            return x.data

        succ_link = x.right
        while not succ_link.node.left.is_empty():
            succ_link = succ_link.node.left
        succ = succ_link.node

        x.data, succ.data = succ.data, x.data
        succ_link.node = succ.right.take()
        link.node = x
        log.debug3("bstree: deleted key ", repr(k), ", successor ",
                   repr(self.key(x.data)), " moved up")
        return succ.data

    def check(self):
        """Verifies the ordering of the whole tree.

        Raises OrderViolationError for the first key found outside the
        bounds imposed by its ancestors. Keys equal to a bound also
        violate it, so duplicate keys are reported as well.
        Time complexity: O(n)"""
        stack = [(self.root.node, None, None)]
        while stack:
            x, low, high = stack.pop()
            if x is None:
                continue
            k = self.key(x.data)
            if ((low is not None and not low < k) or
                    (high is not None and not k < high)):
                log.debug2("bstree: order check failed at key ", repr(k))
                raise OrderViolationError(k, low, high)
            stack.append((x.right.node, k, high))
            stack.append((x.left.node, low, k))
