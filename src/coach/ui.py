"""
User Interface module.
Handles all console input/output and formatting.
"""
from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

STATUS_STYLES = {
    'found': 'green',
    'follow_up': 'green',
    'not_found': 'yellow',
    'missing': 'yellow',
    'wrong_invocation': 'red',
    'unknown': 'red',
}

class CoachUI:
    def __init__(self, console=None):
        self.console = console or Console()

    def print_welcome(self, profile, entry_count):
        title = Text(profile.title, style="bold white")
        subtitle = Text(f"{entry_count} {profile.noun}s in the knowledge base", style="cyan")

        self.console.print(Panel(
            Align.center(title + "\n" + subtitle),
            border_style="green",
            box=box.DOUBLE
        ))
        self.console.print(
            "[dim]Type a " + profile.noun + ", 'more information', 'help' or 'stop'.[/dim]"
        )

    def print_loading(self, message):
        self.console.print(f"[cyan]{message}[/cyan]")

    def print_error(self, title, message):
        self.console.print(f"[bold red]{title}[/bold red]")
        self.console.print(f"[red]{message}[/red]")

    def display_reply(self, reply):
        """Render a reply the way a visual card would show it."""
        style = STATUS_STYLES.get(reply.status, 'white')
        body = reply.card_content or reply.speech
        if not body:
            return
        self.console.print(Panel(
            body.strip(),
            title=reply.card_title or None,
            subtitle="session ended" if reply.should_end_session else None,
            border_style=style
        ))
        if reply.reprompt:
            self.console.print(f"[dim]{reply.reprompt}[/dim]")

    def display_candidates(self, candidates):
        """Show ranked candidates with their weights."""
        if not candidates:
            self.console.print("[yellow]No entry contains every query word.[/yellow]")
            return
        t = Table(title="Ranking", box=box.SIMPLE)
        t.add_column("#", justify="right")
        t.add_column("Label")
        t.add_column("Weight", justify="right")

        for i, c in enumerate(candidates, 1):
            t.add_row(str(i), c.entry.label, str(c.weight))

        self.console.print(t)
