"""
Architecture test

Goals:
- numbered layers (outer -> inner imports only, same layer allowed)
- the color core stays free of process-level dependencies (files, CLI, env)
"""

from __future__ import annotations

import ast
import pathlib
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"

# Layers (smaller is more inner)
# L0: shared infrastructure, L1: color core, L2: entry points / public surface
LAYER_MAP = {
    ("common",): 0,
    ("util",): 0,
    ("palette_plus",): 1,
    ("palette_plus", "config_loader"): 2,
    ("palette_plus", "cli"): 2,
    ("palette_plus", "__main__"): 2,
    ("palette_plus", "__init__"): 2,
}

CHECK_ROOTS = {"palette_plus", "common", "util"}

# Imports the L1 color core must never make
CORE_FORBIDDEN_IMPORTS = {"yaml", "argparse", "os", "common"}


def iter_py_files(root: pathlib.Path) -> Iterator[pathlib.Path]:
    for p in root.rglob("*.py"):
        if "__pycache__" in p.parts:
            continue
        yield p


def module_name_from_path(path: pathlib.Path) -> str:
    rel = path.relative_to(SRC_DIR).with_suffix("")
    return ".".join(rel.parts)


def split_head(module: str) -> tuple[str, Optional[str]]:
    parts = module.split(".") if module else []
    if not parts:
        return "", None
    head = parts[0]
    second = parts[1] if len(parts) > 1 else None
    return head, second


def layer_of(module: str) -> Optional[int]:
    head, second = split_head(module)
    if not head:
        return None
    if second is not None and (head, second) in LAYER_MAP:
        return LAYER_MAP[(head, second)]
    return LAYER_MAP.get((head,))


def iter_import_edges(py_path: pathlib.Path) -> Iterator[Tuple[str, str]]:
    src_mod = module_name_from_path(py_path)
    text = py_path.read_text(encoding="utf-8")
    tree = ast.parse(text, filename=str(py_path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield src_mod, alias.name  # e.g. "numpy"
        elif isinstance(node, ast.ImportFrom):
            if node.level > 0:  # relative import
                src_parts = src_mod.split(".")
                base = ".".join(src_parts[: -node.level])
                mod = node.module or ""
                tgt = f"{base}.{mod}" if mod else base
                yield src_mod, tgt
            else:
                yield src_mod, node.module or ""


def is_forbidden_edge(src: str, tgt: str) -> bool:
    if layer_of(src) != 1:
        return False
    t_head, _ = split_head(tgt)
    return t_head in CORE_FORBIDDEN_IMPORTS


def within_check_scope(module: str) -> bool:
    head, _ = split_head(module)
    return head in CHECK_ROOTS


def collect_graph_and_violations() -> tuple[Dict[str, Set[str]], list[str], list[str]]:
    layering: list[str] = []
    forbidden: list[str] = []
    graph: Dict[str, Set[str]] = {}

    # 1) collect every module name (nodes)
    py_files: List[pathlib.Path] = list(iter_py_files(SRC_DIR))
    for py in py_files:
        graph.setdefault(module_name_from_path(py), set())

    # 2) collect edges and check them
    for py in py_files:
        for src, tgt in iter_import_edges(py):
            if is_forbidden_edge(src, tgt):
                forbidden.append(f"[{py}] {src} -> {tgt}")
            if not within_check_scope(src) or not within_check_scope(tgt):
                continue
            s_layer = layer_of(src)
            t_layer = layer_of(tgt)
            if s_layer is not None and t_layer is not None and s_layer < t_layer:
                layering.append(f"[{py}] {src} (L{s_layer}) -> {tgt} (L{t_layer})")
            # graph edges only between known modules
            if src in graph and tgt in graph:
                graph[src].add(tgt)

    return graph, layering, forbidden


def find_cycles(graph: Dict[str, Set[str]]) -> List[List[str]]:
    cycles: List[List[str]] = []
    WHITE, GRAY, BLACK = 0, 1, 2
    color: Dict[str, int] = {u: WHITE for u in graph}
    stack: List[str] = []

    def dfs(u: str) -> None:
        color[u] = GRAY
        stack.append(u)
        for v in graph.get(u, ()):
            if color[v] == WHITE:
                dfs(v)
            elif color[v] == GRAY:
                idx = stack.index(v)
                cycle = stack[idx:] + [v]
                # rotate to the lexicographically smallest start to dedupe
                base = min(range(len(cycle) - 1), key=lambda i: cycle[i])
                norm = cycle[base:-1] + cycle[:base] + [cycle[base]]
                if norm not in cycles:
                    cycles.append(norm)
        stack.pop()
        color[u] = BLACK

    for node in list(graph):
        if color[node] == WHITE:
            dfs(node)
    return cycles


def test_layer_lookup() -> None:
    assert layer_of("palette_plus.theme") == 1
    assert layer_of("palette_plus.cli") == 2
    assert layer_of("util.color") == 0
    assert layer_of("numpy") is None


@pytest.mark.smoke
def test_architecture_import_rules():
    graph, layering, forbidden = collect_graph_and_violations()
    assert "palette_plus.theme" in graph
    cycles = find_cycles(graph)
    msgs: list[str] = []
    if layering:
        msgs.append("Layer violations:\n" + "\n".join(layering))
    if forbidden:
        msgs.append("Forbidden-edge violations:\n" + "\n".join(forbidden))
    if cycles:
        rendered = [" -> ".join(c) for c in cycles[:10]]
        suffix = "\n(and more ...)" if len(cycles) > 10 else ""
        msgs.append("Import cycles detected (module-level):\n" + "\n".join(rendered) + suffix)
    if msgs:
        raise AssertionError("\n\n".join(msgs))
