"""Directed friendship graphs: shortest distances, reachability and greedy covers."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path

TITLE = "=== 케빈 베이컨 게임 ==="
OPEN_FAILED = "파일을 열 수 없습니다: {path}"
READ_FAILED = "그래프를 읽을 수 없습니다."
LOADED = "그래프 로드 완료: {count}명의 사람"
DISTANCE_LINE = "(1) {src}번과 {dest}번 사이의 거리: {distance}"
COMPONENTS_LINE = "(2) 연결된 컴포넌트 수 (Lone Wolf): {count}"
BEST_REACH_LINE = (
    "(3) {steps}단계 이내에 가장 많은 사람({count}명)에게 도달 가능한 사람: {person}번"
)
COVER_LINE = "(4) {steps}단계 이내 전체 커버를 위한 최소 인원({count}명): "


class Graph:
    """A directed graph on the vertices ``1..num_vertices``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must not be negative: {num_vertices}")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices + 1)]

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.num_vertices:
            raise ValueError(
                f"vertex {vertex} is outside 1..{self.num_vertices}"
            )

    @property
    def vertices(self) -> range:
        return range(1, self.num_vertices + 1)

    def add_edge(self, src: int, dest: int) -> None:
        """Add a one-way edge from ``src`` to ``dest``."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].append(dest)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check_vertex(vertex)
        return tuple(reversed(self._adjacency[vertex]))

    @classmethod
    def parse(cls, text: str) -> Graph:
        """Build a graph from its text form.

        The first number is the vertex count; the rest of its line is ignored.
        Every following non-blank line is ``src dest dest ...``.
        """
        lines = text.splitlines()
        index = 0
        while index < len(lines) and not lines[index].split():
            index += 1
        if index == len(lines):
            raise ValueError("missing vertex count")
        try:
            count = int(lines[index].split()[0])
        except ValueError as exc:
            raise ValueError(f"invalid vertex count in {lines[index]!r}") from exc
        graph = cls(count)
        for line in lines[index + 1:]:
            fields = line.split()
            if not fields:
                continue
            try:
                src, *dests = (int(field) for field in fields)
            except ValueError as exc:
                raise ValueError(f"invalid edge line {line!r}") from exc
            for dest in dests:
                graph.add_edge(src, dest)
        return graph

    @classmethod
    def from_file(cls, path: str | Path) -> Graph:
        """Read a graph from a file in the text form accepted by :meth:`parse`."""
        return cls.parse(Path(path).read_text(encoding="utf-8"))

    def format(self) -> str:
        """One line per vertex: ``"v: n1 n2 "``."""
        return "\n".join(
            f"{vertex}: " + "".join(f"{n} " for n in self.neighbours(vertex))
            for vertex in self.vertices
        )

    def distances(self, start: int) -> dict[int, int]:
        """Breadth-first distances from ``start`` to every vertex it reaches."""
        self._check_vertex(start)
        dist = {start: 0}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in self.neighbours(current):
                if neighbour not in dist:
                    dist[neighbour] = dist[current] + 1
                    queue.append(neighbour)
        return dist

    def distance(self, src: int, dest: int) -> int | None:
        """Length of the shortest path, or ``None`` if ``dest`` is unreachable."""
        self._check_vertex(dest)
        return self.distances(src).get(dest)

    def count_components(self) -> int:
        """Count searches needed, in vertex order, until every vertex is visited."""
        visited: set[int] = set()
        components = 0
        for vertex in self.vertices:
            if vertex in visited:
                continue
            components += 1
            stack = [vertex]
            while stack:
                current = stack.pop()
                if current in visited:
                    continue
                visited.add(current)
                stack.extend(n for n in self.neighbours(current) if n not in visited)
        return components

    def _reach(self, start: int, max_dist: int) -> set[int]:
        return {v for v, d in self.distances(start).items() if d <= max_dist}

    def count_reachable(self, start: int, max_dist: int) -> int:
        """Number of vertices, ``start`` included, within ``max_dist`` steps."""
        return len(self._reach(start, max_dist))

    def best_reach(self, max_dist: int) -> tuple[int, int]:
        """Return ``(vertex, count)`` for the lowest vertex reaching the most others."""
        best_vertex, best_count = 1, 0
        for vertex in self.vertices:
            count = self.count_reachable(vertex, max_dist)
            if count > best_count:
                best_vertex, best_count = vertex, count
        return best_vertex, best_count

    def greedy_cover(self, max_dist: int) -> list[int]:
        """Greedily pick vertices until all are within ``max_dist`` of a pick.

        Each round picks the lowest vertex that covers the most uncovered ones.
        """
        reach = {vertex: self._reach(vertex, max_dist) for vertex in self.vertices}
        covered: set[int] = set()
        selected: set[int] = set()
        while True:
            best_vertex, best_new = None, 0
            for vertex in self.vertices:
                if vertex in selected:
                    continue
                new = len(reach[vertex] - covered)
                if new > best_new:
                    best_vertex, best_new = vertex, new
            if best_vertex is None:
                break
            selected.add(best_vertex)
            covered |= reach[best_vertex]
        return sorted(selected)


def main(argv: list[str] | None = None) -> int:
    """Answer the four friendship-graph questions for a graph file."""
    parser = argparse.ArgumentParser(description="Analyse a friendship graph.")
    parser.add_argument("path", nargs="?", default="kb.txt", help="graph file")
    parser.add_argument("--src", type=int, default=67, help="first person for the distance")
    parser.add_argument("--dest", type=int, default=26, help="second person for the distance")
    parser.add_argument("--steps", type=int, default=3, help="maximum number of steps")
    args = parser.parse_args(argv)

    print(TITLE)
    try:
        graph = Graph.from_file(args.path)
    except OSError:
        print(OPEN_FAILED.format(path=args.path))
        print(READ_FAILED)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(READ_FAILED)
        return 1

    print(LOADED.format(count=graph.num_vertices))
    print()
    try:
        distance = graph.distance(args.src, args.dest)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(DISTANCE_LINE.format(
        src=args.src, dest=args.dest, distance=-1 if distance is None else distance
    ))
    print(COMPONENTS_LINE.format(count=graph.count_components()))
    person, count = graph.best_reach(args.steps)
    print(BEST_REACH_LINE.format(steps=args.steps, count=count, person=person))
    cover = graph.greedy_cover(args.steps)
    print(COVER_LINE.format(steps=args.steps, count=len(cover))
          + "".join(f"{v} " for v in cover))
    return 0


if __name__ == "__main__":
    sys.exit(main())