"""Rich terminal display for storage-audit."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from storage_audit.models import (
    AuditReport,
    CleanupTip,
    Finding,
    RunTotals,
    SafetyTier,
    SectionFindings,
    SweepResult,
)
from storage_audit.sizing import format_size

RULE = "━" * 60


def make_console(no_color: bool = False, force_terminal: bool | None = None) -> Console:
    """Create a console; colour is also off when stdout is not a terminal.

    With no_color every style escape is dropped, bold included.
    """
    return Console(
        no_color=no_color,
        color_system=None if no_color else "auto",
        force_terminal=force_terminal,
        highlight=False,
        soft_wrap=True,
    )


console = make_console()


def set_console(new_console: Console) -> None:
    """Replace the console used by every show_* function."""
    global console
    console = new_console


def tier_icon(tier: SafetyTier) -> str:
    """Get icon for a safety tier."""
    icons = {
        SafetyTier.SAFE: "✅",
        SafetyTier.CAUTION: "⚠️ ",
        SafetyTier.REVIEW: "🔍",
    }
    return icons.get(tier, "  ")


def tier_color(tier: SafetyTier) -> str:
    """Get rich color name for a safety tier."""
    colors = {
        SafetyTier.SAFE: "green",
        SafetyTier.CAUTION: "yellow",
        SafetyTier.REVIEW: "cyan",
    }
    return colors.get(tier, "default")


def tier_label(tier: SafetyTier) -> str:
    """Tier name as shown in the report, e.g. [SAFE]."""
    # Upper-case brackets are not rich markup, so no escaping is needed
    return f"[{tier.value.upper()}]"


def show_header(user: str, started_at: datetime) -> None:
    """Display the report title and the accuracy note."""
    console.print()
    console.print("[bold]🔎 macOS System Data Storage Audit[/bold]")
    console.print(f"   Running as: {escape(user)} | Date: {started_at:%Y-%m-%d %H:%M}")
    console.print("   [yellow]Note: Some directories may need 'sudo' for accurate sizing[/yellow]")


def show_section_header(title: str, icon: str = "") -> None:
    """Display a boxed section heading."""
    heading = f"{icon} {title}" if icon else title
    console.print()
    console.print(f"[bold blue]{RULE}[/bold blue]")
    console.print(f"[bold blue]  {escape(heading)}[/bold blue]")
    console.print(f"[bold blue]{RULE}[/bold blue]")


def show_finding(finding: Finding) -> None:
    """Display one finding: size line, optional note, path."""
    color = tier_color(finding.tier)
    size = format_size(finding.size_bytes)
    console.print(
        f"  {tier_icon(finding.tier)} [{color}]{escape(f'{finding.label:<42}')} {size:>10}[/{color}]"
        f"  {tier_label(finding.tier)}"
    )
    if finding.advisory:
        console.print(f"     ↳ {escape(finding.advisory)}")
    console.print(f"     Path: {escape(finding.path)}")


def show_section(section: SectionFindings) -> None:
    """Display a catalog section and its findings."""
    show_section_header(section.name, section.icon)
    for finding in section.findings:
        show_finding(finding)


def show_sweep(result: SweepResult) -> None:
    """Display the ranked matches of a sweep."""
    show_section_header(result.title, "📊")
    if result.skipped:
        return

    if not result.matches:
        console.print(f"  No large {escape(result.noun)} found.")
        return

    for match in result.matches:
        console.print(f"  📁 {escape(f'{match.path:<50}')} {format_size(match.size_bytes):>10}")

    console.print()
    console.print(f"  [bold]Total {escape(result.noun)} found: {format_size(result.total_bytes)}[/bold]")
    if result.retained_count > len(result.matches):
        console.print(
            f"  [dim]Showing the {len(result.matches)} largest of {result.retained_count}[/dim]"
        )
    if result.tip:
        console.print(f"  [green]Tip: {escape(result.tip)}[/green]")


def show_cleanup_tips(tips: list[CleanupTip]) -> None:
    """Display the copy-and-paste cleanup cheat sheet."""
    console.print("  [bold]Quick wins (copy & paste these commands):[/bold]")
    for tip in tips:
        console.print()
        console.print(f"  [cyan]# {escape(tip.comment)}[/cyan]")
        for command in tip.commands:
            console.print(f"  {escape(command)}")


def show_summary(totals: RunTotals, tips: list[CleanupTip]) -> None:
    """Display the reclaimable total, the cheat sheet and the closing warning."""
    show_section_header("SUMMARY", "📊")
    console.print()
    console.print(
        Panel(
            f"[bold green]Estimated safely reclaimable space: "
            f"{format_size(totals.reclaimable_safe_bytes)}[/bold green]\n"
            "[yellow](Items marked SAFE only; REVIEW and CAUTION items may add "
            "significantly more)[/yellow]",
            border_style="green",
            expand=False,
        )
    )
    console.print()
    show_cleanup_tips(tips)
    console.print()
    console.print("[bold yellow]⚠️  Always verify before deleting! This tool provides estimates.[/bold yellow]")
    console.print("[bold yellow]   Run with 'sudo' for more accurate system directory sizing.[/bold yellow]")
    console.print()


def show_report(report: AuditReport, tips: list[CleanupTip]) -> None:
    """Display a complete audit report."""
    show_header(report.user, report.started_at)
    for section in report.catalog.sections:
        show_section(section)
    for sweep in report.sweeps:
        show_sweep(sweep)
    show_summary(report.catalog.totals, tips)


def show_scanning_progress() -> Progress:
    """Create a transient spinner for the scan."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
