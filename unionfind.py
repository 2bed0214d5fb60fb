class UnionFind:
    '''
    Disjoint-set forest over the integers 0..n-1.

    Nodes live in two flat lists indexed by vertex id: `parent` (a root
    points at itself) and `size`, which is only meaningful at roots and is
    used for union by size. `find` compresses paths as it walks.
    '''

    def __init__(self, n_verts: int) -> None:
        if n_verts < 0:
            raise ValueError('Number of vertices must be nonnegative')

        # size 0 marks a slot that make_set has not initialised yet
        self.parent = list(range(n_verts))
        self.size = [0] * n_verts
        self.count = 0

        for v in range(n_verts):
            self.make_set(v)

    def __len__(self) -> int:
        return len(self.parent)

    def _validate(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise IndexError(f'index {index} is not between 0 and {len(self.parent) - 1}')

    def make_set(self, index: int) -> None:
        self._validate(index)
        if self.size[index]:
            raise ValueError(f'index {index} is already in a set')

        self.parent[index] = index
        self.size[index] = 1
        self.count += 1

    def find(self, index: int) -> int:
        self._validate(index)
        parent = self.parent

        # path halving: point every other node on the walk at its grandparent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]

        return index

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def union(self, i: int, j: int) -> bool:
        '''
        Merge the sets holding i and j.

        Returns False if they were already in the same set.
        '''
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.size[i] > self.size[j]:
            i, j = j, i

        # the smaller root i goes under j
        self.parent[i] = j
        self.size[j] += self.size[i]
        self.count -= 1
        return True
