"""Dynamic forest with link, cut and path queries (link-cut tree on splay trees)."""

from __future__ import annotations


class LinkCut:
    """Link-cut tree over vertices 0..n-1; vertices can be added later."""

    def __init__(self, n: int = 0) -> None:
        self._parent = [-1] * n
        self._sons = [[-1, -1] for _ in range(n)]
        self._inv = [False] * n
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def add(self) -> int:
        """Add an isolated vertex and return its index."""
        self._parent.append(-1)
        self._sons.append([-1, -1])
        self._inv.append(False)
        self._size.append(1)
        return len(self._parent) - 1

    def _push(self, v: int) -> None:
        if self._inv[v]:
            self._inv[v] = False
            sons = self._sons[v]
            sons[0], sons[1] = sons[1], sons[0]
            for u in sons:
                if u != -1:
                    self._inv[u] = not self._inv[u]

    def _relax(self, v: int) -> None:
        self._push(v)
        self._size[v] = 1 + sum(self._size[x] for x in self._sons[v] if x != -1)

    def _rotate(self, v: int) -> None:
        parent, sons = self._parent, self._sons
        u = parent[v]
        w = parent[u]
        self._push(u)
        self._push(v)
        parent[v] = w
        if w != -1:
            for k in range(2):
                if sons[w][k] == u:
                    sons[w][k] = v
        i = 1 if sons[u][1] == v else 0
        child = sons[v][i ^ 1]
        sons[u][i] = child
        if child != -1:
            parent[child] = u
        sons[v][i ^ 1] = u
        parent[u] = v
        self._relax(u)
        self._relax(v)

    def _is_root(self, v: int) -> bool:
        p = self._parent[v]
        return p == -1 or (self._sons[p][0] != v and self._sons[p][1] != v)

    def _splay(self, v: int) -> None:
        parent, sons = self._parent, self._sons
        while not self._is_root(v):
            u = parent[v]
            if not self._is_root(u):
                same = (sons[parent[u]][0] == u) == (sons[u][0] == v)
                self._rotate(u if same else v)
            self._rotate(v)
        self._push(v)

    def _expose(self, v: int) -> int:
        prev = -1
        u = v
        while u != -1:
            self._splay(u)
            self._sons[u][1] = prev
            self._relax(u)
            prev = u
            u = self._parent[u]
        self._splay(v)
        return prev

    def set_root(self, root: int) -> None:
        """Make root the root of its tree."""
        self._expose(root)
        self._inv[root] = not self._inv[root]
        self._push(root)

    def connected(self, v: int, u: int) -> bool:
        if v == u:
            return True
        self._expose(v)
        self._expose(u)
        return self._parent[v] != -1

    def link(self, v: int, u: int) -> bool:
        """Add edge (v, u); return False if they are already connected."""
        if self.connected(v, u):
            return False
        self._inv[u] = not self._inv[u]
        self._parent[u] = v
        self._expose(u)
        return True

    def cut(self, v: int, u: int) -> bool:
        """Remove edge (v, u); return False if there is no such edge."""
        if v == u:
            return False
        self.set_root(v)
        self._expose(u)
        if self._sons[u][0] != v:
            return False
        self._sons[u][0] = -1
        self._relax(u)
        self._parent[v] = -1
        return True

    def parent(self, v: int, root: int) -> int:
        """Parent of v when the tree is rooted at root, or -1."""
        if not self.connected(v, root):
            return -1
        self.set_root(root)
        self._expose(v)
        if self._sons[v][0] == -1:
            return -1
        v = self._sons[v][0]
        while True:
            self._push(v)
            if self._sons[v][1] == -1:
                break
            v = self._sons[v][1]
        self._splay(v)
        return v

    def distance(self, v: int, u: int) -> int:
        """Number of edges between v and u, or -1 if disconnected."""
        if not self.connected(v, u):
            return -1
        self.set_root(v)
        self._expose(u)
        left = self._sons[u][0]
        return 0 if left == -1 else self._size[left]

    def lca(self, v: int, u: int, root: int) -> int:
        """Lowest common ancestor of v and u with the tree rooted at root."""
        self.set_root(root)
        self._expose(v)
        return self._expose(u)