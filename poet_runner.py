"""
CLI to build an affinity poet from a corpus and write poems.

Either takes a corpus file and sentences on the command line, or reads a YAML
config naming the corpus, the input sentences and an optional edge CSV.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional, Sequence
import argparse
import csv
import logging
import sys
import time

from poet import AffinityPoet
from weighted_graph import WeightedDirectedGraph


@dataclass(frozen=True)
class Config:
    corpus: Path
    inputs: Sequence[str]
    encoding: str = "utf-8"
    edges_csv: Optional[Path] = None


def load_config(path: Path) -> Config:
    """Load a run config; relative paths are resolved against the config's directory."""
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    base = path.parent
    edges_csv = data.get("edges_csv")
    inputs = data.get("inputs") or []
    if isinstance(inputs, str):
        inputs = [inputs]
    elif not isinstance(inputs, list):
        raise TypeError(f"inputs must be a sentence or a list of sentences, got {type(inputs).__name__}")
    return Config(
        corpus=base / data["corpus"],
        inputs=[str(line) for line in inputs],
        encoding=str(data.get("encoding", "utf-8")),
        edges_csv=base / edges_csv if edges_csv else None,
    )


def build_poet(cfg: Config) -> AffinityPoet:
    """Build the poet from cfg.corpus; raises OSError if it cannot be read."""
    poet = AffinityPoet.from_file(cfg.corpus, encoding=cfg.encoding)
    print(f"[poet] built graph from {cfg.corpus}: {len(poet)} words")
    return poet


def run_poems(cfg: Config, poet: Optional[AffinityPoet] = None) -> List[Dict[str, str]]:
    """
    Generate one poem per input sentence, building the poet if not given.

    Raises OSError if the corpus cannot be read.
    """
    start = time.time()
    if poet is None:
        poet = build_poet(cfg)

    results = [{"input": line, "poem": poet.poem(line)} for line in cfg.inputs]

    if cfg.edges_csv:
        write_edges_csv(poet.graph(), cfg.edges_csv)
        print(f"[poet] wrote edges to {cfg.edges_csv}")

    elapsed = time.time() - start
    print(f"[poet] completed {len(results)} poems in {elapsed:.2f}s")
    return results


def write_edges_csv(graph: WeightedDirectedGraph[str], path: Path) -> None:
    """
    Write the graph's weighted edges to CSV, one row per edge.
    """
    fieldnames = ["source", "target", "weight"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for src, dst, weight in graph.edges():
            writer.writerow({"source": src, "target": dst, "weight": weight})


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Insert corpus bridge words into sentences")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--corpus", type=Path, help="Corpus text file")
    source.add_argument("--config", type=Path, help="YAML run config")
    parser.add_argument("sentences", nargs="*", help="Input sentences, added after any config inputs")
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding")
    parser.add_argument("--edges-csv", type=Path, help="Write the affinity graph edges here")
    parser.add_argument("--show-graph", action="store_true", help="Print the affinity graph")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.config:
        try:
            cfg = load_config(args.config)
        except OSError as exc:
            print(f"[poet] cannot read config {args.config}: {exc}", file=sys.stderr)
            return 1
        cfg = replace(cfg, inputs=[*cfg.inputs, *args.sentences])
    else:
        cfg = Config(corpus=args.corpus, inputs=list(args.sentences), encoding=args.encoding)
    if args.edges_csv:
        cfg = replace(cfg, edges_csv=args.edges_csv)

    try:
        poet = build_poet(cfg)
    except OSError as exc:
        print(f"[poet] cannot read corpus {cfg.corpus}: {exc}", file=sys.stderr)
        return 1

    results = run_poems(cfg, poet)
    if args.show_graph:
        print(poet)
    for res in results:
        print(res["poem"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
