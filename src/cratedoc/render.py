from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text


def group_table(group) -> Table:
    table = Table(show_header=True, header_style="bold green", box=None, pad_edge=False)
    table.add_column(group.kind.label)
    for listing in group.listings:
        # Names are page text, not markup: "Vec<[T]>" must print as is.
        table.add_row(Text(listing.name), style="italic yellow")
    return table


def render_page(page, console=None):
    console = console or Console()
    if not page.groups:
        console.print("[yellow]No listings found.[/yellow]")
        return
    for group in page.groups:
        console.print(group_table(group))
        console.print()


def render_listing(listing, console=None):
    console = console or Console()
    console.print(f"[bold]{escape(listing.name)}[/bold]  {escape(listing.url)}", highlight=False)
