from typing import Dict, Hashable, Iterator

class DisjointSet:
    """
    Union-find over arbitrary hashable items.
    Items are created lazily as singletons the first time they are seen.
    """
    def __init__(self):
        self.parents: Dict[Hashable, Hashable] = {}
        self.sizes: Dict[Hashable, int] = {}

    def __contains__(self, item) -> bool:
        return item in self.parents

    def __len__(self) -> int:
        return len(self.parents)

    def add(self, item):
        if item not in self.parents:
            self.parents[item] = item
            self.sizes[item] = 1

    def find_root(self, item):
        self.add(item)
        root = item
        while self.parents[root] != root:
            root = self.parents[root]
        # Path compression
        while self.parents[item] != root:
            self.parents[item], item = root, self.parents[item]
        return root

    def union(self, a, b) -> bool:
        """Joins the smaller set into the bigger one. False if already joined."""
        root_a = self.find_root(a)
        root_b = self.find_root(b)
        if root_a == root_b:
            return False
        if self.sizes[root_a] < self.sizes[root_b]:
            root_a, root_b = root_b, root_a
        self.parents[root_b] = root_a
        self.sizes[root_a] += self.sizes.pop(root_b)
        return True

    def set_size(self, item) -> int:
        return self.sizes[self.find_root(item)]

    def roots(self) -> Iterator[Hashable]:
        return iter(self.sizes)
