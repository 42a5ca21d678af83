from typing import Hashable, Iterable


class DisjointSet:
    """Union-find over hashable elements, with path compression and union by rank."""

    def __init__(self, elements: Iterable[Hashable] = ()):
        self.parent: dict[Hashable, Hashable] = {}
        self.rank: dict[Hashable, int] = {}
        self.components = 0
        for el in elements:
            self.add(el)

    def add(self, el: Hashable):
        if el in self.parent:
            return
        self.parent[el] = el
        self.rank[el] = 0
        self.components += 1

    def find(self, el: Hashable) -> Hashable:
        if el not in self.parent:
            self.add(el)
            return el

        root = el
        while self.parent[root] != root:
            root = self.parent[root]

        # compress the path we just walked
        while self.parent[el] != root:
            self.parent[el], el = root, self.parent[el]

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the components of a and b. Returns False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.components -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def __len__(self):
        return len(self.parent)

    def __contains__(self, el: Hashable):
        return el in self.parent
