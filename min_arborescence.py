from __future__ import annotations

import os
import sys
import re
import time
import traceback
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence, Union

Weight = Union[int, float, Fraction]

# Returned when some vertex cannot be reached from the root.
NO_ARBORESCENCE = -1


# =====================================================
# Data model
# =====================================================
class Edge(NamedTuple):
    source: int
    target: int
    weight: Weight


@dataclass
class Graph:
    """
    Working graph of one iteration.
    - vertices: live vertex ids, ascending
    - vertex_count: highest id issued so far (super-vertices continue from here)
    - edges: edge list owned by this iteration
    """
    vertices: List[int]
    vertex_count: int
    edges: List[Edge]

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Sequence]) -> "Graph":
        return cls(
            vertices=list(range(1, vertex_count + 1)),
            vertex_count=vertex_count,
            edges=[Edge(int(u), int(v), w) for u, v, w in edges],
        )


@dataclass
class Selection:
    """Cheapest incoming edge per vertex (index = vertex id, None = absent)."""
    source: List[Optional[int]]
    weight: List[Optional[Weight]]

    def missing(self, vertices: Iterable[int], root: int) -> Optional[int]:
        """First live non-root vertex without a candidate incoming edge."""
        for v in vertices:
            if v != root and self.source[v] is None:
                return v
        return None

    def total(self, vertices: Iterable[int], root: int) -> Weight:
        return sum(self.weight[v] for v in vertices if v != root)


@dataclass
class Contraction:
    graph: Graph
    root: int
    cycle_weight: Weight
    super_vertices: List[int] = field(default_factory=list)


# =====================================================
# Minimum incoming edge selection
# =====================================================
class MinIncomingEdgeSelector:
    """
    For every vertex, keep the cheapest incoming edge (self-loops skipped).
    Ties keep the edge seen first, so a fixed edge order gives a fixed selection.
    """

    @staticmethod
    def select(graph: Graph, root: int) -> Selection:
        size = graph.vertex_count + 1
        source: List[Optional[int]] = [None] * size
        weight: List[Optional[Weight]] = [None] * size

        for u, v, w in graph.edges:
            if u == v or v == root:
                continue
            best = weight[v]
            if best is None or w < best:
                source[v] = u
                weight[v] = w

        return Selection(source=source, weight=weight)


# =====================================================
# Cycle detection on the predecessor graph
# =====================================================
class CycleDetector:
    """
    Each non-root vertex points to the source of its selected edge, so the
    selection is a functional graph. Walk the pointers iteratively; a walk that
    hits a vertex stamped by itself has closed a cycle.
    """

    def __init__(self, selection: Selection, vertices: Sequence[int], root: int, vertex_count: int):
        self.selection = selection
        self.vertices = vertices
        self.root = root
        self.vertex_count = vertex_count

    def _walks(self):
        # stamp[v]: 0 = unvisited, k = visited by walk k
        stamp = [0] * (self.vertex_count + 1)
        pred = self.selection.source
        walk_id = 0

        for start in self.vertices:
            if start == self.root or stamp[start]:
                continue
            walk_id += 1
            path: List[int] = []
            curr: Optional[int] = start

            while curr is not None and curr != self.root and not stamp[curr]:
                stamp[curr] = walk_id
                path.append(curr)
                curr = pred[curr]

            if curr is not None and curr != self.root and stamp[curr] == walk_id:
                yield path[path.index(curr):]

    def find_cycle(self) -> Optional[List[int]]:
        """Return one cycle (ordered vertex list) or None if the selection is acyclic."""
        for cycle in self._walks():
            return cycle
        return None

    def find_cycles(self) -> List[List[int]]:
        """Return every cycle of the selection; they are pairwise disjoint."""
        return list(self._walks())


# =====================================================
# Cycle contraction
# =====================================================
class GraphContractor:
    """
    Collapse cycles into super-vertices.
    - edge entering the cycle at v: weight minus v's selected weight
    - edge leaving the cycle: weight unchanged
    - edge inside the cycle: dropped
    """

    @staticmethod
    def contract(graph: Graph, cycle: Sequence[int], selection: Selection, root: int) -> Contraction:
        return GraphContractor.contract_many(graph, [cycle], selection, root)

    @staticmethod
    def contract_many(
        graph: Graph,
        cycles: Sequence[Sequence[int]],
        selection: Selection,
        root: int,
    ) -> Contraction:
        if not cycles:
            raise ValueError("contract_many() needs at least one cycle")

        # owner[v]: super-vertex absorbing v, 0 when v is not on a cycle
        owner = [0] * (graph.vertex_count + 1)
        super_vertices: List[int] = []
        cycle_weight: Weight = 0
        next_id = graph.vertex_count

        for cycle in cycles:
            next_id += 1
            super_vertices.append(next_id)
            for v in cycle:
                if owner[v]:
                    raise ValueError(f"Vertex {v} appears in more than one cycle")
                owner[v] = next_id
                cycle_weight += selection.weight[v]

        sel_weight = selection.weight
        new_edges: List[Edge] = []
        for edge in graph.edges:
            u, v, w = edge
            cu = owner[u]
            cv = owner[v]
            if not cu and not cv:
                new_edges.append(edge)
            elif not cu:
                new_edges.append(Edge(u, cv, w - sel_weight[v]))
            elif not cv:
                new_edges.append(Edge(cu, v, w))
            elif cu != cv:
                # between two different cycles contracted in the same pass
                new_edges.append(Edge(cu, cv, w - sel_weight[v]))

        vertices = [v for v in graph.vertices if not owner[v]]
        vertices.extend(super_vertices)
        new_root = owner[root] or root

        return Contraction(
            graph=Graph(vertices=vertices, vertex_count=next_id, edges=new_edges),
            root=new_root,
            cycle_weight=cycle_weight,
            super_vertices=super_vertices,
        )


# =====================================================
# Iteration controller
# =====================================================
class ArborescenceSolver:
    """
    Chu-Liu/Edmonds reduction: select, detect, contract, repeat.
    Only the total weight is produced, the tree itself is not rebuilt.
    """

    def __init__(
        self,
        contract_all_cycles: bool = False,
        debug_print: Optional[Callable[..., None]] = None,
    ):
        self.contract_all_cycles = contract_all_cycles
        self.debug_print = debug_print
        self.iterations = 0
        self.contractions = 0

    def _log(self, *args) -> None:
        if self.debug_print is not None:
            self.debug_print(*args)

    def solve(self, vertex_count: int, edges: Iterable[Sequence], root: int = 1) -> Weight:
        self.iterations = 0
        self.contractions = 0

        graph = Graph.from_edges(vertex_count, edges)
        total: Weight = 0

        while True:
            self.iterations += 1
            selection = MinIncomingEdgeSelector.select(graph, root)

            missing = selection.missing(graph.vertices, root)
            if missing is not None:
                self._log(f"[iter {self.iterations}] vertex {missing} has no incoming edge")
                return NO_ARBORESCENCE

            detector = CycleDetector(selection, graph.vertices, root, graph.vertex_count)
            if self.contract_all_cycles:
                cycles = detector.find_cycles()
            else:
                cycle = detector.find_cycle()
                cycles = [cycle] if cycle is not None else []

            if not cycles:
                total += selection.total(graph.vertices, root)
                self._log(
                    f"[iter {self.iterations}] acyclic selection, "
                    f"{len(graph.vertices)} vertices, total={total}"
                )
                return total

            contraction = GraphContractor.contract_many(graph, cycles, selection, root)
            total += contraction.cycle_weight
            self.contractions += len(cycles)
            self._log(
                f"[iter {self.iterations}] contracted {len(cycles)} cycle(s) "
                f"of sizes {[len(c) for c in cycles]} -> {contraction.super_vertices}, "
                f"vertices {len(graph.vertices)} -> {len(contraction.graph.vertices)}, "
                f"edges {len(graph.edges)} -> {len(contraction.graph.edges)}, total={total}"
            )

            graph = contraction.graph
            root = contraction.root


def compute_min_arborescence_weight(vertex_count: int, edges: Iterable[Sequence], root: int = 1) -> Weight:
    """
    Total weight of a minimum arborescence rooted at `root`.

    Parameters
    ----------
    vertex_count : int
        Number of vertices, ids are 1..vertex_count.
    edges : iterable of (source, target, weight)
        Non-negative weights; self-loops and parallel edges allowed.
    root : int
        Root vertex, defaults to 1.

    Returns
    -------
    int, float or Fraction
        The minimum total weight, or ``NO_ARBORESCENCE`` (-1) when some vertex
        is unreachable from the root.

    Examples
    --------
    >>> compute_min_arborescence_weight(3, [(1, 2, 4), (2, 3, 1), (3, 2, 1), (1, 3, 5)])
    5
    """
    return ArborescenceSolver().solve(vertex_count, edges, root)


# =====================================================
# Input processor
# =====================================================
class InputDataProcessor:
    """
    Turn tokenised rows into (vertex_count, edges, root).
    - first row: n m [root]
    - next rows: u v w
    Integral weight tokens become int, others Fraction, so reweighting stays exact.
    """

    def __init__(self, lines: List[List[str]], default_root: int = 1):
        self.lines = lines
        self.default_root = default_root

        self.vertex_count = 0
        self.declared_edge_count: Optional[int] = None
        self.root = default_root
        self.edges: List[Edge] = []
        self.self_loop_count = 0
        self.warnings: List[str] = []

        self._parse()

    @staticmethod
    def parse_weight(token: str) -> Weight:
        s = token.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            w = Fraction(s)
        except (ValueError, ZeroDivisionError):
            raise ValueError(f"Invalid edge weight: {token!r}") from None
        return int(w) if w.denominator == 1 else w

    @staticmethod
    def _parse_int(token: str, what: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Invalid {what}: {token!r}") from None

    def _parse(self) -> None:
        rows = [row for row in self.lines if row]
        if not rows:
            raise ValueError("Empty input: expected a header line 'n m [root]'")

        header = rows[0]
        if len(header) < 2:
            raise ValueError(f"Header must contain at least 'n m', got {header!r}")

        n = self._parse_int(header[0], "vertex count")
        if n < 1:
            raise ValueError(f"Vertex count must be >= 1, got {n}")
        self.vertex_count = n
        self.declared_edge_count = self._parse_int(header[1], "edge count")
        if len(header) >= 3:
            self.root = self._parse_int(header[2], "root")
        if not 1 <= self.root <= n:
            raise ValueError(f"Root {self.root} outside [1, {n}]")

        for lineno, row in enumerate(rows[1:], start=2):
            if len(row) < 3:
                raise ValueError(f"Edge row {lineno} needs 'u v w', got {row!r}")
            u = self._parse_int(row[0], "edge source")
            v = self._parse_int(row[1], "edge target")
            w = self.parse_weight(row[2])
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError(f"Edge row {lineno}: endpoint outside [1, {n}]: {u} -> {v}")
            if w < 0:
                raise ValueError(f"Edge row {lineno}: negative weight {row[2]}")
            if u == v:
                self.self_loop_count += 1
            self.edges.append(Edge(u, v, w))

        if self.declared_edge_count != len(self.edges):
            self.warnings.append(
                f"Header declares {self.declared_edge_count} edges, found {len(self.edges)}"
            )


# =====================================================
# App-level orchestration
# =====================================================
@dataclass(frozen=True)
class AppConfig:
    """Config container - all parameters set in main"""
    # Contract every disjoint cycle of a pass at once instead of one per pass. Same result. Default: False.
    contract_all_cycles: bool = False
    # Max vertex count accepted from input. 0 means unlimited.
    max_vertices: int = 1000
    # Max edge count accepted from input. 0 means unlimited.
    max_edges: int = 10000
    # Root used when the header line does not name one.
    default_root: int = 1
    # Seconds; a slower run is reported in the debug log.
    time_budget: float = 10.0
    # Print detailed debug/progress info. Default: False.
    verbose: bool = False
    # Log filename for debug output.
    debug_log_file: Optional[str] = None
    # Generate separate log file for each run. Default: False.
    generate_individual_log: bool = False
    # Delete individual logs after consolidation (used with --task=consolidate_logs). Default: True.
    delete_after_consolidate: bool = True

    # Callback interfaces
    on_progress: Optional[Callable[[str, float], None]] = None
    on_complete: Optional[Callable[[Dict], None]] = None


class ArborescenceApp:
    def __init__(self, config: Optional[AppConfig] = None):
        self.cfg = config or AppConfig()
        self.debug_output: List[str] = []
        self.progress_data: Dict[str, float] = {}
        self.last_stats: Dict = {}

    def _progress(self, stage: str, progress: float = 0.0) -> None:
        """Progress callback"""
        self.progress_data[stage] = progress
        if self.cfg.on_progress:
            self.cfg.on_progress(stage, progress)

    def _debug_print(self, *args, **kwargs) -> None:
        """Unified debug printer"""
        msg = " ".join(str(arg) for arg in args)
        self.debug_output.append(msg)

        if self.cfg.verbose:
            print(*args, **kwargs)

    def _save_debug_log(self, log_file: Optional[str] = None) -> None:
        """Save debug log to file"""
        if log_file is None:
            log_file = self.cfg.debug_log_file

        if log_file and self.debug_output:
            try:
                with open(log_file, "w", encoding="utf-8") as f:
                    f.write("\n".join(self.debug_output))
                if self.cfg.verbose:
                    print(f"[DEBUG] Log saved to: {log_file}")
            except OSError as e:
                print(f"Failed to save log: {e}", file=sys.stderr)

    def consolidate_logs(self, directory: str, consolidated_log_file: str) -> None:
        """Scan directory, consolidate all .delog files, and optionally delete them."""
        self._debug_print(f"Start consolidating logs in directory: {directory}")
        log_files = [f for f in os.listdir(directory) if f.endswith(".delog")]

        if not log_files:
            self._debug_print("No .delog files found.")
            return

        self._debug_print(f"Found {len(log_files)} .delog files: {sorted(log_files)}")

        with open(consolidated_log_file, "a", encoding="utf-8") as outfile:
            for filename in sorted(log_files):
                filepath = os.path.join(directory, filename)
                outfile.write(f"\n{'='*20} Source: {filename} {'='*20}\n\n")
                try:
                    with open(filepath, "r", encoding="utf-8") as infile:
                        outfile.write(infile.read())
                    outfile.write("\n\n")
                except OSError as e:
                    outfile.write(f"*** Failed to read file: {filepath}, Error: {e} ***\n\n")

        self._debug_print(f"All logs consolidated to: {consolidated_log_file}")

        if self.cfg.delete_after_consolidate:
            self._debug_print("Deleting individual .delog files...")
            deleted_count = 0
            for filename in log_files:
                filepath = os.path.join(directory, filename)
                try:
                    os.remove(filepath)
                    deleted_count += 1
                except OSError as e:
                    self._debug_print(f"Failed to delete file: {filepath}, Error: {e}")
            self._debug_print(f"Successfully deleted {deleted_count} .delog files.")
        else:
            self._debug_print("Individual .delog files preserved.")

    # -------- I/O --------
    @staticmethod
    def _tokenize(raw_lines: Iterable[str]) -> List[List[str]]:
        raw = [line.strip() for line in raw_lines]
        raw = [line for line in raw if line and not line.startswith("#")]
        lines = [re.split(r"[,\s]+", line) for line in raw]
        return [list(filter(None, row)) for row in lines]

    def _read_input(self, input_file: str) -> List[List[str]]:
        with open(input_file, "r", encoding="utf-8", errors="ignore") as f:
            return self._tokenize(f)

    def _read_input_from_text(self, text: str) -> List[List[str]]:
        """Read input from text string"""
        return self._tokenize(text.strip().splitlines())

    @staticmethod
    def format_weight(weight: Weight) -> str:
        if isinstance(weight, Fraction):
            if weight.denominator == 1:
                return str(weight.numerator)
            return repr(float(weight))
        if isinstance(weight, float) and weight.is_integer():
            return str(int(weight))
        return str(weight)

    def _write_output(self, output_file: str, weight: Weight) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(f"{self.format_weight(weight)}\n")

    def _complete(self, stats: Dict) -> None:
        """Completion callback"""
        self.last_stats = stats
        if self.cfg.on_complete:
            self.cfg.on_complete(stats)

    # -------- core pipeline --------
    def _check_limits(self, vertex_count: int, edge_count: int) -> None:
        if self.cfg.max_vertices and vertex_count > self.cfg.max_vertices:
            raise ValueError(f"Vertex count {vertex_count} exceeds limit {self.cfg.max_vertices}")
        if self.cfg.max_edges and edge_count > self.cfg.max_edges:
            raise ValueError(f"Edge count {edge_count} exceeds limit {self.cfg.max_edges}")

    def solve(self, vertex_count: int, edges: Sequence[Sequence], root: int = 1) -> Weight:
        """Run the solver under this app's config, with limits and debug logging."""
        self._check_limits(vertex_count, len(edges))

        solver = ArborescenceSolver(
            contract_all_cycles=self.cfg.contract_all_cycles,
            debug_print=self._debug_print,
        )
        start_time = time.time()
        weight = solver.solve(vertex_count, edges, root)
        duration = time.time() - start_time

        self._debug_print(
            f"Solved n={vertex_count}, m={len(edges)}, root={root}: "
            f"weight={self.format_weight(weight)}, iterations={solver.iterations}, "
            f"contractions={solver.contractions}, {duration:.3f}s"
        )
        if duration > self.cfg.time_budget:
            self._debug_print(f"[WARN] Time budget exceeded: {duration:.2f}s > {self.cfg.time_budget:.2f}s")
        return weight

    def _execute_pipeline(self, lines: List[List[str]]) -> Weight:
        """Parse, validate and solve; returns the weight or NO_ARBORESCENCE"""
        processor = InputDataProcessor(lines, default_root=self.cfg.default_root)
        self._progress("parse_input", 0.3)

        for warning in processor.warnings:
            self._debug_print(f"[WARN] {warning}")
        if processor.self_loop_count:
            self._debug_print(f"Ignoring {processor.self_loop_count} self-loop(s)")

        weight = self.solve(processor.vertex_count, processor.edges, processor.root)
        self._progress("solve", 0.9)
        return weight

    def run_from_text(self, text: str) -> Weight:
        """Run full pipeline on an in-memory input"""
        self._progress("start", 0.0)
        lines = self._read_input_from_text(text)
        weight = self._execute_pipeline(lines)
        self._progress("complete", 1.0)
        return weight

    def run_from_file(self, input_file: str, output_file: str) -> Optional[Weight]:
        """Run full pipeline from file input"""
        self._progress("start", 0.0)
        self._debug_print(f"Processing: {input_file}")

        start_time = time.time()
        weight: Optional[Weight] = None
        error: Optional[str] = None

        # Determine log filename for this run
        log_file_to_use = self.cfg.debug_log_file
        if self.cfg.generate_individual_log:
            base_name = os.path.basename(input_file)
            file_name_without_ext = os.path.splitext(base_name)[0]
            log_file_to_use = f"{file_name_without_ext}.delog"

        try:
            lines = self._read_input(input_file)
            self._progress("read_input", 0.1)

            weight = self._execute_pipeline(lines)

            self._write_output(output_file, weight)
            self._progress("write_output", 1.0)

        except (OSError, ValueError) as e:
            error = str(e)
            self._debug_print(f"Process failed: {input_file}, Error: {e}")
            self._debug_print(traceback.format_exc())
        finally:
            duration = time.time() - start_time
            self._debug_print(f"Completed: {input_file}, Duration: {duration:.2f}s")

            final_stats = {
                "input_file": input_file,
                "output_file": output_file,
                "weight": weight,
                "error": error,
                "duration": duration,
                "progress": dict(self.progress_data),
            }

            if log_file_to_use:
                self._save_debug_log(log_file_to_use)

            self._complete(final_stats)

        return weight

    def run_on_networkx_graph(self, G, root, weight: str = "weight", default: Weight = 1) -> Weight:
        """
        Execute pipeline directly on a NetworkX directed graph.

        Parameters
        ----------
        G : networkx.DiGraph or networkx.MultiDiGraph
            Input graph. Nodes may be any hashable objects.
        root : node
            Root node of the arborescence.
        weight : str
            Edge attribute holding the weight.
        default : number
            Weight used for edges without the attribute.

        Returns
        -------
        number
            Minimum arborescence weight, or NO_ARBORESCENCE.
        """
        self._progress("start", 0.0)
        if not G.is_directed():
            raise ValueError("run_on_networkx_graph() requires a directed graph")
        if root not in G:
            raise ValueError(f"Root node {root!r} not in graph")

        # Map original nodes to 1..n in G.nodes() order
        node_index = {node: i for i, node in enumerate(G.nodes(), start=1)}

        edges: List[Edge] = []
        for u, v, data in G.edges(data=True):
            edges.append(Edge(node_index[u], node_index[v], data.get(weight, default)))
        self._progress("convert", 0.2)

        result = self.solve(len(node_index), edges, node_index[root])
        self._progress("complete", 1.0)
        return result


# =====================================================
# NetworkX Adapter
# =====================================================
def minimum_arborescence_weight(G, root, weight: str = "weight", default: Weight = 1) -> Weight:
    """
    Compute the weight of a minimum spanning arborescence of G rooted at `root`.

    Unlike `networkx.minimum_spanning_arborescence`, the root is fixed by the
    caller and infeasibility is reported through the return value instead of
    an exception.

    Parameters
    ----------
    G : NetworkX DiGraph or MultiDiGraph
    root : node
    weight : str, optional
        Edge attribute to use for edge weights (default "weight").
    default : number, optional
        Weight for edges missing the attribute (default 1).

    Returns
    -------
    number
        The total weight, or ``NO_ARBORESCENCE`` (-1).

    Examples
    --------
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_weighted_edges_from([(0, 1, 3), (0, 2, 5), (1, 2, 1), (2, 1, 1)])
    >>> minimum_arborescence_weight(G, 0)
    4
    """
    app = ArborescenceApp(AppConfig(verbose=False, max_vertices=0, max_edges=0))
    return app.run_on_networkx_graph(G, root, weight=weight, default=default)


def build_arg_parser():
    import argparse
    from dataclasses import fields

    parser = argparse.ArgumentParser(description="Minimum-weight arborescence (Chu-Liu/Edmonds) total weight.")

    # Core Task Arguments
    parser.add_argument("--task", type=str, default="run", choices=["run", "consolidate_logs"],
                        help="Task to execute: 'run' (process input) or 'consolidate_logs'.")

    # 'run' task arguments
    parser.add_argument("--input", "-i", type=str, help="Input file path (required for task='run').")
    parser.add_argument("--output", "-o", type=str, help="Output file path (required for task='run').")

    # Positional args compatibility: python min_arborescence.py input_file output_file
    parser.add_argument("input_pos", nargs="?", help="Input file path (positional)")
    parser.add_argument("output_pos", nargs="?", help="Output file path (positional)")

    # 'consolidate_logs' task arguments
    parser.add_argument("--log_dir", type=str, default=".",
                        help="Directory containing .delog files (for 'consolidate_logs').")
    parser.add_argument("--consolidated_log", type=str, default="consolidated_debug.log",
                        help="Consolidated log filename (for 'consolidate_logs').")

    # AppConfig dynamic arguments
    for f in fields(AppConfig):
        if f.name in ["on_progress", "on_complete"]:
            continue

        arg_name = f"--{f.name.replace('_', '-')}"

        # Annotations are strings under `from __future__ import annotations`
        is_bool = f.type is bool or f.type == "bool"

        if is_bool:
            if f.default:
                parser.add_argument(f"--no-{f.name.replace('_', '-')}", dest=f.name, action="store_false",
                                    help=f"Disable {f.name}")
                parser.set_defaults(**{f.name: True})
            else:
                parser.add_argument(arg_name, dest=f.name, action="store_true", help=f"Enable {f.name}")
        else:
            arg_type = str
            if f.type is int or f.type == "int":
                arg_type = int
            elif f.type is float or f.type == "float":
                arg_type = float

            parser.add_argument(arg_name, dest=f.name, type=arg_type, default=f.default,
                                help=f"Set {f.name} (default: {f.default})")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    from dataclasses import fields

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    # Pass parsed args to AppConfig
    config_dict = {f.name: getattr(args, f.name) for f in fields(AppConfig) if f.name in args}
    config = AppConfig(**config_dict)

    app = ArborescenceApp(config)

    if args.task == "run":
        input_file = args.input or args.input_pos
        output_file = args.output or args.output_pos

        if not input_file or not output_file:
            parser.error("Must specify input and output files (via positional args or --input/--output).")
        app.run_from_file(input_file, output_file)
        return 1 if app.last_stats.get("error") else 0

    # consolidate_logs: clear the consolidated log file once before consolidation
    if os.path.exists(args.consolidated_log):
        open(args.consolidated_log, "w").close()
    app.consolidate_logs(args.log_dir, args.consolidated_log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
