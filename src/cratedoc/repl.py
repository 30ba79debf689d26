import webbrowser
import anyio
from rich.console import Console
from .build import build_docs
from .core import lookup_subject, open_page
from .errors import ContentError, NotFound
from .render import render_listing, render_page

PROMPT = ">> "

# Command name -> number of arguments it takes.
COMMANDS = {
    "lookup": 1,
    "fetch": 1,
    "find": 1,
    "open": 1,
    "list": 0,
    "build": 0,
    "help": 0,
    "quit": 0,
    "exit": 0,
}

HELP = """\
lookup <crate>  show the locally built docs of a crate (target/doc)
fetch <crate>   show the docs.rs docs of a crate
find <name>     find an item of the open crate by name or name suffix
open <name>     like find, then open the item in a browser
list            show the open crate again
build           run the documentation build in this directory
quit            leave"""


class Command:
    def __init__(self, name, args=()):
        self.name = name
        self.args = tuple(args)

    def __eq__(self, other):
        return isinstance(other, Command) and (self.name, self.args) == (other.name, other.args)

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"


UNKNOWN = Command("unknown")


def parse_command(line):
    """Parse one input line; returns None for a blank line."""
    line = line.strip()
    if not line:
        return None
    parts = line.split(" ")
    name, args = parts[0], parts[1:]
    if COMMANDS.get(name) != len(args):
        return UNKNOWN
    return Command(name, args)


class Session:
    """Interactive lookup session over one open crate at a time."""

    def __init__(self, read_line=input, console=None, cwd=None, lookup=lookup_subject,
                 build=build_docs, open_url=webbrowser.open, verbose=False):
        self.read_line = read_line
        self.console = console or Console()
        self.cwd = cwd
        self.lookup = lookup
        self.build = build
        self.open_url = open_url
        self.verbose = verbose
        self.page = None
        self.index = None

    def log(self, message, verbose_only=False):
        if verbose_only:
            self.console.print(f"DEBUG: {message}", markup=False, highlight=False)
        else:
            self.console.print(message, markup=False, highlight=False)

    def run(self):
        while True:
            try:
                line = self.read_line(PROMPT)
            except EOFError:
                break
            command = parse_command(line)
            if command is None:
                continue
            if not self.handle(command):
                break

    def handle(self, command) -> bool:
        """Run one command; returns False when the session should end."""
        name = command.name
        if name in ("quit", "exit"):
            return False
        if name == "lookup":
            self.open_subject(command.args[0], online=False)
        elif name == "fetch":
            self.open_subject(command.args[0], online=True)
        elif name == "find":
            self.find(command.args[0])
        elif name == "open":
            listing = self.find(command.args[0])
            if listing is not None:
                self.open_url(listing.url)
        elif name == "list":
            if self._require_page():
                render_page(self.page, self.console)
        elif name == "build":
            self.build(self.cwd, log_callback=self.log, verbose=self.verbose)
        elif name == "help":
            self.console.print(HELP, markup=False, highlight=False)
        else:
            self.console.print("Unknown command")
        return True

    def open_subject(self, subject, online):
        try:
            page = anyio.run(self.lookup, subject, online, None, self.cwd, None, self.log, self.verbose)
        except NotFound as e:
            if online:
                self.console.print(str(e), markup=False)
                return
            self.console.print(f"No locally built documentation for {subject}.", markup=False)
            answer = self._ask(f"Fetch {subject} from docs.rs instead? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                return
            self.open_subject(subject, online=True)
            return
        except ContentError as e:
            self.console.print(str(e), markup=False)
            return

        self.page, self.index = open_page(page)
        render_page(self.page, self.console)

    def find(self, query):
        if not self._require_page():
            return None
        listing = self.index.find(query)
        if listing is None:
            self.console.print(f"No listing matches {query}", markup=False)
            return None
        render_listing(listing, self.console)
        return listing

    def _require_page(self):
        if self.page is None:
            self.console.print("No crate is open. Use lookup <crate> or fetch <crate> first.", markup=False)
            return False
        return True

    def _ask(self, prompt):
        try:
            return self.read_line(prompt)
        except EOFError:
            return ""


def main(verbose=False):
    Session(verbose=verbose).run()
