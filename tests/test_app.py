"""Tests for input parsing, app orchestration, the networkx adapter and the CLI.

These are offline tests; files are written under pytest's tmp_path.
"""

from fractions import Fraction

import networkx as nx
import pytest

from min_arborescence import (
    NO_ARBORESCENCE,
    AppConfig,
    ArborescenceApp,
    Edge,
    InputDataProcessor,
    build_arg_parser,
    main,
    minimum_arborescence_weight,
)


CHAIN_TEXT = """\
# n m root
4 5 1
1 2 1
1 3 5
2 3 1
2 4 2
3 4 1
"""


def _rows(text):
    return ArborescenceApp()._read_input_from_text(text)


# ── InputDataProcessor ──────────────────────────────────────────

class TestInputDataProcessor:

    def test_parses_header_and_edges(self):
        p = InputDataProcessor(_rows(CHAIN_TEXT))
        assert p.vertex_count == 4
        assert p.declared_edge_count == 5
        assert p.root == 1
        assert p.edges[0] == Edge(1, 2, 1)
        assert len(p.edges) == 5
        assert p.warnings == []

    def test_root_defaults_when_missing(self):
        p = InputDataProcessor(_rows("3 1\n1 2 4"), default_root=2)
        assert p.root == 2

    def test_comma_separated(self):
        p = InputDataProcessor(_rows("2,1,1\n1,2,7"))
        assert p.edges == [Edge(1, 2, 7)]

    def test_fractional_weight_is_exact(self):
        p = InputDataProcessor(_rows("2 1\n1 2 0.1"))
        assert p.edges[0].weight == Fraction(1, 10)

    def test_integral_decimal_weight_becomes_int(self):
        p = InputDataProcessor(_rows("2 1\n1 2 3.0"))
        assert p.edges[0].weight == 3
        assert isinstance(p.edges[0].weight, int)

    def test_edge_count_mismatch_is_a_warning(self):
        p = InputDataProcessor(_rows("2 3\n1 2 1"))
        assert len(p.warnings) == 1
        assert "declares 3 edges" in p.warnings[0]

    def test_counts_self_loops(self):
        p = InputDataProcessor(_rows("2 2\n1 2 1\n2 2 0"))
        assert p.self_loop_count == 1

    @pytest.mark.parametrize("text", [
        "",
        "4",
        "0 0",
        "x 1",
        "3 1 5",
        "3 1\n1 2",
        "3 1\n1 4 2",
        "3 1\n1 2 -1",
        "3 1\n1 2 abc",
        "3 1\n1 b 2",
    ])
    def test_invalid_input_raises(self, text):
        with pytest.raises(ValueError):
            InputDataProcessor(_rows(text))


# ── ArborescenceApp ─────────────────────────────────────────────

class TestArborescenceApp:

    def test_run_from_text(self):
        assert ArborescenceApp().run_from_text(CHAIN_TEXT) == 3

    def test_run_from_text_infeasible(self):
        assert ArborescenceApp().run_from_text("2 1\n2 1 5") == NO_ARBORESCENCE

    def test_batch_mode_same_result(self):
        text = "5 6\n1 2 10\n2 3 1\n3 2 1\n1 4 20\n4 5 2\n5 4 2"
        assert ArborescenceApp(AppConfig(contract_all_cycles=True)).run_from_text(text) == 33
        assert ArborescenceApp().run_from_text(text) == 33

    def test_vertex_limit(self):
        app = ArborescenceApp(AppConfig(max_vertices=3))
        with pytest.raises(ValueError, match="Vertex count"):
            app.run_from_text(CHAIN_TEXT)

    def test_edge_limit(self):
        app = ArborescenceApp(AppConfig(max_edges=4))
        with pytest.raises(ValueError, match="Edge count"):
            app.run_from_text(CHAIN_TEXT)

    def test_zero_disables_limits(self):
        app = ArborescenceApp(AppConfig(max_vertices=0, max_edges=0))
        assert app.run_from_text(CHAIN_TEXT) == 3

    def test_progress_callback(self):
        stages = []
        app = ArborescenceApp(AppConfig(on_progress=lambda s, p: stages.append((s, p))))
        app.run_from_text(CHAIN_TEXT)
        assert stages[0] == ("start", 0.0)
        assert stages[-1] == ("complete", 1.0)
        assert "solve" in app.progress_data

    def test_debug_output_collects_solver_lines(self):
        app = ArborescenceApp()
        app.run_from_text("3 3\n1 2 5\n2 3 1\n3 2 1")
        assert any("contracted 1 cycle(s)" in line for line in app.debug_output)
        assert any(line.startswith("Solved n=3") for line in app.debug_output)

    def test_verbose_echoes(self, capsys):
        ArborescenceApp(AppConfig(verbose=True)).run_from_text(CHAIN_TEXT)
        assert "Solved n=4" in capsys.readouterr().out

    def test_time_budget_warning(self):
        app = ArborescenceApp(AppConfig(time_budget=-1.0))
        app.run_from_text(CHAIN_TEXT)
        assert any("Time budget exceeded" in line for line in app.debug_output)

    def test_header_warning_logged(self):
        app = ArborescenceApp()
        app.run_from_text("2 5\n1 2 1")
        assert any("[WARN] Header declares 5 edges" in line for line in app.debug_output)

    @pytest.mark.parametrize("weight, text", [
        (3, "3"),
        (NO_ARBORESCENCE, "-1"),
        (Fraction(4, 1), "4"),
        (Fraction(3, 2), "1.5"),
        (2.0, "2"),
        (0.75, "0.75"),
    ])
    def test_format_weight(self, weight, text):
        assert ArborescenceApp.format_weight(weight) == text


class TestRunFromFile:

    def test_writes_output(self, tmp_path):
        src = tmp_path / "chain.txt"
        src.write_text(CHAIN_TEXT, encoding="utf-8")
        out = tmp_path / "chain.out"

        stats = {}
        app = ArborescenceApp(AppConfig(on_complete=stats.update))
        assert app.run_from_file(str(src), str(out)) == 3
        assert out.read_text(encoding="utf-8") == "3\n"
        assert stats["weight"] == 3
        assert stats["error"] is None
        assert stats["progress"]["write_output"] == 1.0

    def test_fractional_output(self, tmp_path):
        src = tmp_path / "frac.txt"
        src.write_text("3 3\n1 2 0.5\n2 3 0.25\n1 3 1", encoding="utf-8")
        out = tmp_path / "frac.out"
        ArborescenceApp().run_from_file(str(src), str(out))
        assert out.read_text(encoding="utf-8") == "0.75\n"

    def test_bad_input_is_reported_not_raised(self, tmp_path):
        src = tmp_path / "bad.txt"
        src.write_text("3 1\n1 2 -4", encoding="utf-8")
        out = tmp_path / "bad.out"

        app = ArborescenceApp()
        assert app.run_from_file(str(src), str(out)) is None
        assert not out.exists()
        assert "negative weight" in app.last_stats["error"]
        assert any("Traceback" in line for line in app.debug_output)

    def test_missing_file_is_reported(self, tmp_path):
        app = ArborescenceApp()
        assert app.run_from_file(str(tmp_path / "nope.txt"), str(tmp_path / "o.txt")) is None
        assert app.last_stats["error"]

    def test_debug_log_file(self, tmp_path):
        src = tmp_path / "chain.txt"
        src.write_text(CHAIN_TEXT, encoding="utf-8")
        log = tmp_path / "run.log"
        app = ArborescenceApp(AppConfig(debug_log_file=str(log)))
        app.run_from_file(str(src), str(tmp_path / "chain.out"))
        text = log.read_text(encoding="utf-8")
        assert "Processing:" in text
        assert "Completed:" in text

    def test_individual_log(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        src = tmp_path / "case7.txt"
        src.write_text(CHAIN_TEXT, encoding="utf-8")
        app = ArborescenceApp(AppConfig(generate_individual_log=True))
        app.run_from_file(str(src), str(tmp_path / "case7.out"))
        assert (tmp_path / "case7.delog").exists()


class TestConsolidateLogs:

    @pytest.fixture
    def log_dir(self, tmp_path):
        d = tmp_path / "logs"
        d.mkdir()
        (d / "a.delog").write_text("alpha", encoding="utf-8")
        (d / "b.delog").write_text("beta", encoding="utf-8")
        (d / "keep.txt").write_text("other", encoding="utf-8")
        return d

    def test_merges_and_deletes(self, tmp_path, log_dir):
        target = tmp_path / "all.log"
        ArborescenceApp().consolidate_logs(str(log_dir), str(target))
        text = target.read_text(encoding="utf-8")
        assert text.index("alpha") < text.index("beta")
        assert "Source: a.delog" in text
        assert sorted(p.name for p in log_dir.iterdir()) == ["keep.txt"]

    def test_preserves_when_configured(self, tmp_path, log_dir):
        target = tmp_path / "all.log"
        app = ArborescenceApp(AppConfig(delete_after_consolidate=False))
        app.consolidate_logs(str(log_dir), str(target))
        assert (log_dir / "a.delog").exists()
        assert "Individual .delog files preserved." in app.debug_output

    def test_nothing_to_do(self, tmp_path):
        app = ArborescenceApp()
        app.consolidate_logs(str(tmp_path), str(tmp_path / "all.log"))
        assert "No .delog files found." in app.debug_output
        assert not (tmp_path / "all.log").exists()


# ── networkx adapter ────────────────────────────────────────────

class TestNetworkxAdapter:

    def test_string_nodes(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([
            ("r", "a", 3), ("r", "b", 5), ("a", "b", 1), ("b", "a", 1),
        ])
        assert minimum_arborescence_weight(G, "r") == 4

    def test_matches_networkx_when_root_has_no_in_edges(self):
        G = nx.gnp_random_graph(40, 0.2, seed=3, directed=True)
        G.remove_edges_from(list(G.in_edges(0)))
        for i, (u, v) in enumerate(G.edges()):
            G[u][v]["weight"] = (i * 7) % 13
        try:
            expected = sum(d["weight"] for _, _, d in
                           nx.minimum_spanning_arborescence(G).edges(data=True))
        except nx.NetworkXException:
            expected = NO_ARBORESCENCE
        assert minimum_arborescence_weight(G, 0) == expected

    def test_multidigraph_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge(0, 1, weight=9)
        G.add_edge(0, 1, weight=2)
        assert minimum_arborescence_weight(G, 0) == 2

    def test_custom_attribute_and_default(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, cost=4)
        G.add_edge(1, 2)
        assert minimum_arborescence_weight(G, 0, weight="cost", default=10) == 14

    def test_unreachable(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, weight=1)
        G.add_node(2)
        assert minimum_arborescence_weight(G, 0) == NO_ARBORESCENCE

    def test_undirected_rejected(self):
        with pytest.raises(ValueError):
            minimum_arborescence_weight(nx.path_graph(3), 0)

    def test_unknown_root_rejected(self):
        G = nx.DiGraph([(0, 1)])
        with pytest.raises(ValueError):
            minimum_arborescence_weight(G, 7)

    def test_no_size_limits(self):
        G = nx.DiGraph()
        nx.add_path(G, range(1500), weight=1)
        assert minimum_arborescence_weight(G, 0) == 1499


# ── CLI ─────────────────────────────────────────────────────────

class TestCli:

    def test_positional_run(self, tmp_path):
        src = tmp_path / "in.txt"
        src.write_text(CHAIN_TEXT, encoding="utf-8")
        out = tmp_path / "out.txt"
        assert main([str(src), str(out)]) == 0
        assert out.read_text(encoding="utf-8") == "3\n"

    def test_flag_run_with_batch_mode(self, tmp_path):
        src = tmp_path / "in.txt"
        src.write_text(CHAIN_TEXT, encoding="utf-8")
        out = tmp_path / "out.txt"
        assert main(["--input", str(src), "--output", str(out), "--contract-all-cycles"]) == 0
        assert out.read_text(encoding="utf-8") == "3\n"

    def test_failed_run_exit_code(self, tmp_path):
        src = tmp_path / "in.txt"
        src.write_text("garbage", encoding="utf-8")
        assert main([str(src), str(tmp_path / "out.txt")]) == 1

    def test_missing_files_is_usage_error(self):
        with pytest.raises(SystemExit):
            main([])

    def test_config_flags(self):
        args = build_arg_parser().parse_args([
            "--max-vertices", "5", "--time-budget", "2.5",
            "--no-delete-after-consolidate", "--verbose",
        ])
        assert args.max_vertices == 5
        assert args.time_budget == 2.5
        assert args.delete_after_consolidate is False
        assert args.verbose is True
        assert args.contract_all_cycles is False

    def test_consolidate_task(self, tmp_path):
        (tmp_path / "x.delog").write_text("xlog", encoding="utf-8")
        target = tmp_path / "merged.log"
        target.write_text("stale", encoding="utf-8")
        rc = main(["--task", "consolidate_logs", "--log_dir", str(tmp_path),
                   "--consolidated_log", str(target)])
        assert rc == 0
        text = target.read_text(encoding="utf-8")
        assert "stale" not in text
        assert "xlog" in text
