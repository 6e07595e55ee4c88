"""Adjacency-matrix graphs with shortest paths and transitive closure."""

from collections import deque


class DirectedGraph:
    """A directed graph on vertices 1..n stored as an adjacency matrix."""

    def __init__(self, vertices):
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative: {vertices}")
        self.vertices = vertices
        self._matrix = [[False] * vertices for _ in range(vertices)]

    def _valid(self, *vertices):
        return all(1 <= v <= self.vertices for v in vertices)

    def add_edge(self, i, j):
        """Add the edge i -> j; vertices out of range are ignored."""
        if self._valid(i, j):
            self._matrix[i - 1][j - 1] = True

    def remove_edge(self, i, j):
        """Remove the edge i -> j; vertices out of range are ignored."""
        if self._valid(i, j):
            self._matrix[i - 1][j - 1] = False

    def has_edge(self, i, j):
        """Tell whether the edge i -> j exists."""
        if not self._valid(i, j):
            raise IndexError(f"vertex pair ({i}, {j}) out of range")
        return self._matrix[i - 1][j - 1]

    def matrix_text(self):
        """Render the adjacency matrix as rows of 0 and 1."""
        return "\n".join(" ".join("1" if cell else "0" for cell in row) for row in self._matrix)

    def _successors(self, vertex):
        row = self._matrix[vertex - 1]
        return (j for j, linked in enumerate(row, start=1) if linked)

    def find_path(self, source, destination):
        """Return a shortest path as a list of vertices, or None if there is none."""
        if not self._valid(source, destination):
            raise IndexError(f"vertex pair ({source}, {destination}) out of range")
        parent = {source: None}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            if current == destination:
                break
            for nxt in self._successors(current):
                if nxt not in parent:
                    parent[nxt] = current
                    queue.append(nxt)
        else:
            return None
        path = []
        vertex = destination
        while vertex is not None:
            path.append(vertex)
            vertex = parent[vertex]
        path.reverse()
        return path


class UndirectedGraph(DirectedGraph):
    """An undirected graph: every edge is stored in both directions."""

    def add_edge(self, i, j):
        super().add_edge(i, j)
        super().add_edge(j, i)

    def remove_edge(self, i, j):
        super().remove_edge(i, j)
        super().remove_edge(j, i)

    def transitive_closure(self):
        """Return the closure matrix; entry [i-1][j-1] tells whether a path i ~> j exists."""
        closure = [row[:] for row in self._matrix]
        for k, row_k in enumerate(closure):
            for row in closure:
                if row[k]:
                    row[:] = [a or b for a, b in zip(row, row_k)]
        return closure


def format_path(path):
    """Describe a path found by find_path."""
    if path is None:
        return "No path found."
    return f"Path length: {len(path) - 1}\nPath: " + " ".join(str(v) for v in path)


def format_closure(closure):
    """Render a closure matrix as rows of 0 and 1."""
    return "\n".join(" ".join(str(int(cell)) for cell in row) for row in closure)