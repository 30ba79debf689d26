import argparse
import anyio
from rich.console import Console
from .core import lookup_subject, open_page, search_listing
from .errors import ContentError
from .render import render_listing, render_page
from .repl import main as repl_main

def main(argv=None):
    p = argparse.ArgumentParser(prog="cratedoc", description="List the documented items of a Rust crate.")
    p.add_argument("crate", nargs="?", help="Crate to list; without one the interactive prompt starts")
    p.add_argument("--online", action="store_true", help="Fetch the docs from docs.rs instead of target/doc")
    p.add_argument("--find", metavar="NAME", help="Only show the item matching NAME")
    p.add_argument("--verbose", "-v", action="store_true")
    args = p.parse_args(argv)

    if args.crate is None:
        repl_main(verbose=args.verbose)
        return 0

    console = Console()

    def log(m, verbose_only=False):
        if verbose_only:
            print(f"DEBUG: {m}")
        else:
            print(m)

    try:
        page = anyio.run(lookup_subject, args.crate, args.online, None, None, None, log, args.verbose)
    except ContentError as e:
        print(e)
        return 1

    page, index = open_page(page)
    if args.find is None:
        render_page(page, console)
        return 0

    listing = search_listing(index, args.find)
    if listing is None:
        print(f"No listing matches {args.find}")
        return 1
    render_listing(listing, console)
    return 0
