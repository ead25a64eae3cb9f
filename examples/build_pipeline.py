#!/usr/bin/env python3
"""Build pipeline example.

Builds a small fan-out/fan-in graph, prints the exported batch, and runs it
with a minimal graphlib-based scheduler standing in for a real one.

Usage:
    python examples/build_pipeline.py
"""

from rich.console import Console

from dagsmith import Graph, join, print_batch


def step(name):
    def run():
        print(f"  running {name}")

    run.__qualname__ = name
    return run


def main():
    console = Console()
    graph = Graph()

    # checkout -> (lint, test, docs) -> package -> publish
    checkout = graph.root(step("checkout"))
    checks = checkout.fork((step("lint"), step("test"), step("docs")))
    checks.join(step("package")).then(step("publish"))

    # Changelog needs the release notes and the docs build
    notes = graph.root(step("release-notes"))
    join([notes, checks[2]], step("changelog"))

    batch = graph.export()
    print_batch(batch, console=console, title="build pipeline")

    console.print("\n[bold]Dispatch order:[/]")
    sorter = batch.to_sorter()
    sorter.prepare()
    while sorter.is_active():
        for label in sorter.get_ready():
            batch.get(label).task()
            sorter.done(label)


if __name__ == "__main__":
    main()
