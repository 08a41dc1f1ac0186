import json
from pathlib import Path

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from linkgraph.main import configure_logging
from linkgraph.services.config import get_config
from linkgraph.services.documents import MarkdownDocumentSource
from linkgraph.services.graph_builder import build_graph
from linkgraph.services.links import LinkExtractor
from linkgraph.services.physics import ForceSimulator

APP_HELP = """
linkgraph: force-directed graphs of wiki-linked Markdown documents.

Documents link to each other with [[Title]] or [[Title|alias]]. Titles come
from frontmatter `title`, the first `# heading`, or the file name. Documents
without any resolved link are left out of the graph.
"""

app = typer.Typer(name="linkgraph", help=APP_HELP, no_args_is_help=True)


def _load(path: Path):
    if not path.exists():
        print(f"[red]Directory not found:[/red] {path}")
        raise typer.Exit(code=1)
    return MarkdownDocumentSource(path).load()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    if verbose:
        configure_logging("DEBUG")


@app.command("links")
def links(path: Path = typer.Argument(..., help="Directory of Markdown documents")):
    """List resolved links and per-document neighbor counts."""
    documents = _load(path)
    extraction = LinkExtractor().extract(documents)
    titles = {document.id: document.title for document in documents}

    table = Table(title=f"Links ({len(extraction.edges)})")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="magenta")
    for edge in extraction.edges:
        table.add_row(escape(titles[edge.source_id]), escape(titles[edge.target_id]))
    print(table)

    counts = Table(title="Neighbor counts")
    counts.add_column("Document", style="cyan")
    counts.add_column("Links", justify="right")
    for document_id, count in sorted(extraction.neighbor_counts.items(), key=lambda item: -item[1]):
        counts.add_row(escape(titles[document_id]), str(count))
    print(counts)


@app.command("layout")
def layout(
    path: Path = typer.Argument(..., help="Directory of Markdown documents"),
    ticks: int = typer.Option(200, "--ticks", "-n", min=0, help="Simulation steps to run"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Run the simulation for a fixed number of steps and print positions."""
    config = get_config()
    graph = build_graph(_load(path), config)
    nodes = ForceSimulator(config).run(graph.nodes, graph.edges, ticks)

    if json_output:
        payload = {
            "nodes": [node.model_dump() for node in nodes],
            "edges": [edge.model_dump() for edge in graph.edges],
            "ticks": ticks,
        }
        typer.echo(json.dumps(payload))
        return

    if not nodes:
        print("[yellow]No connections yet.[/yellow] Link documents using [[Title]] syntax.")
        return

    table = Table(title=f"Layout after {ticks} ticks")
    table.add_column("Node", style="cyan")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Links", justify="right")
    for node in nodes:
        table.add_row(escape(node.label), f"{node.position.x:.1f}", f"{node.position.y:.1f}", str(node.neighbor_count))
    print(table)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
):
    """Run the HTTP API."""
    from linkgraph.main import run_server

    run_server(host=host, port=port)


if __name__ == "__main__":
    app()
