"""CLI interface for seo-scorecard."""

import json
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from . import __version__
from .batch import BatchAnalyzer, BatchResult, FixedDelay, NoThrottle, read_url_list
from .config import Settings, setup_logging
from .engine import analyze_page, failed_report, quick_check, score
from .extraction import ExtractionError, FirecrawlExtractor, normalize_url
from .models import QuickReport, ScoreReport, Severity
from .normalizer import normalize
from .reports import batch_to_dict, quick_report_to_dict, report_to_dict, save_report
from .rubric import RUBRICS


console = Console()


def severity_style(severity: Severity) -> str:
    """Get Rich style for severity level."""
    return {
        Severity.CRITICAL: "red",
        Severity.WARNING: "yellow",
        Severity.SUGGESTION: "blue",
    }.get(severity, "white")


def severity_icon(severity: Severity) -> str:
    """Get icon for severity level."""
    return {
        Severity.CRITICAL: "✗",
        Severity.WARNING: "⚠",
        Severity.SUGGESTION: "ℹ",
    }.get(severity, "•")


def score_color(score: int) -> str:
    """Get color for a score value."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange1"
    else:
        return "red"


def print_score_bar(score: int, grade: str, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = int((score / 100) * width)
    empty = width - filled
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * empty, style="dim")
    bar.append(f" {score}/100 ({grade})", style=f"bold {color}")
    return bar


def print_report(report: ScoreReport, verbose: bool = False) -> None:
    """Print a score report to the console."""

    if report.error:
        console.print(f"\n[red]Error:[/red] {report.url}: {report.error}")
        return

    console.print()
    console.print(Panel(
        f"[bold]{report.url}[/bold]\n"
        f"[dim]{report.word_count} words • {report.h1_count} H1 • "
        f"{report.image_count} images • {report.link_count} links[/dim]",
        title="🔍 SEO Scorecard",
        border_style="blue"
    ))

    console.print()
    console.print("  SEO Score: ", end="")
    console.print(print_score_bar(report.overall_score, report.grade, width=25))
    console.print()

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Check", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    for check in report.checks:
        pct = int((check.score / check.max_score) * 100) if check.max_score > 0 else 0
        if check.passed:
            status = "[green]OK[/green]"
        else:
            status = ", ".join(
                f"[{severity_style(i.severity)}]{i.severity.value}[/]" for i in check.issues
            )
        table.add_row(
            check.name,
            f"[{score_color(pct)}]{check.score}/{check.max_score}[/]",
            status
        )

    console.print(table)

    # Non-verbose output hides suggestions
    shown = [
        i for i in report.issues
        if verbose or i.severity in (Severity.CRITICAL, Severity.WARNING)
    ]
    if shown:
        console.print("\n[bold]Issues Found:[/bold]\n")
        for issue in shown:
            style = severity_style(issue.severity)
            console.print(f"  [{style}]{severity_icon(issue.severity)}[/] {issue.message}")

    recommendations = report.recommendations if verbose else report.recommendations[:5]
    if recommendations:
        console.print("\n[bold]🎯 Recommendations:[/bold]\n")
        for i, rec in enumerate(recommendations, 1):
            console.print(f"  {i}. [bold]{rec.action}[/bold] [dim](priority {rec.priority})[/dim]")
            console.print(f"     [cyan]{rec.impact}[/cyan]")

    console.print()
    console.print("[dim]─" * 50 + "[/dim]")
    console.print(f"[dim]seo-scorecard v{__version__}[/dim]")
    console.print()


def print_quick_report(report: QuickReport) -> None:
    console.print()
    console.print(Panel(f"[bold]{report.url}[/bold]", title="⚡ Quick SEO Check", border_style="blue"))
    console.print(f"  Title: {report.title or '[red]Missing[/red]'}")
    console.print(f"  Meta Description: {report.meta_description or '[red]Missing[/red]'}")
    console.print(f"  H1 Tags: {report.h1_count}")
    console.print(f"  Images: {report.image_count}")
    console.print(f"  Word Count: {report.word_count}")
    console.print("  Quick Score: ", end="")
    console.print(print_score_bar(report.quick_score, report.grade))
    console.print()


def print_batch(result: BatchResult) -> None:
    summary = result.summary()

    console.print()
    console.print(Panel(
        f"Total URLs: {summary['total_analyzed']}  •  "
        f"[green]Successful: {summary['successful']}[/green]  •  "
        f"[red]Failed: {summary['failed']}[/red]\n"
        f"Average Score: [bold]{summary['average_score']:.1f}/100[/bold]",
        title="📊 Batch Analysis",
        border_style="blue"
    ))

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("URL", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Grade")
    for report in result.reports:
        if report.failed:
            table.add_row(report.url, "-", f"[red]failed: {report.error}[/red]")
        else:
            color = score_color(report.overall_score)
            table.add_row(report.url, f"[{color}]{report.overall_score}[/]", report.grade)
    console.print(table)

    if summary["common_issues"]:
        console.print("[bold]🔍 Most Common Issues:[/bold]\n")
        for i, issue in enumerate(summary["common_issues"], 1):
            console.print(f"  {i}. {issue['type']} ({issue['percentage']}% of pages)")

    best = summary["best_performer"]
    if best:
        console.print("\n[bold]⭐ Best Performer:[/bold]\n")
        console.print(f"  {best['url']} ({best['score']}/100)")
        if best["strengths"]:
            console.print(f"  [dim]{', '.join(best['strengths'])}[/dim]")
    console.print()


def _extractor(settings: Settings, timeout: float | None) -> FirecrawlExtractor:
    return FirecrawlExtractor(
        api_key=settings.api_key,
        api_url=settings.api_url,
        timeout=timeout if timeout is not None else settings.timeout,
    )


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


rubric_option = click.option(
    "--rubric", "rubric_name", type=click.Choice(sorted(RUBRICS)), default="standard",
    help="Scoring rubric to apply"
)


@click.group(invoke_without_command=True)
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level (default: SEO_SCORECARD_LOG_LEVEL or WARNING)")
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx, log_level):
    """SEO Scorecard - score a page's on-page SEO.

    \b
    Quick start:
        seo-scorecard scan example.com
        seo-scorecard batch urls.txt

    \b
    Commands:
        scan    Extract and score a URL
        quick   Presence-only quick check of a URL
        score   Score a saved extraction JSON file
        batch   Score every URL listed in a file
    """
    settings = Settings()
    setup_logging(settings, log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("url")
@click.option("-v", "--verbose", is_flag=True, help="Show all issues and recommendations")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--save", is_flag=True, help="Save the JSON report to the report directory")
@rubric_option
@click.pass_obj
def scan(settings: Settings, url: str, verbose: bool, timeout: float | None,
         json_output: bool, save: bool, rubric_name: str):
    """Extract a URL and score it.

    \b
    Examples:
        seo-scorecard scan stripe.com
        seo-scorecard scan example.com --verbose
        seo-scorecard scan example.com --json --rubric extended
    """
    url = normalize_url(url)
    extractor = _extractor(settings, timeout)

    with console.status(f"[bold blue]Scanning {url}...[/bold blue]"):
        try:
            report = analyze_page(url, extractor.extract(url), RUBRICS[rubric_name])
        except ExtractionError as e:
            report = failed_report(url, e.reason)

    payload = report_to_dict(report)
    if save:
        path = save_report(payload, url, settings.report_directory)
        click.echo(f"📄 Report saved: {path}", err=True)

    if json_output:
        _echo_json(payload)
    else:
        print_report(report, verbose=verbose)

    if report.failed:
        sys.exit(1)


@cli.command()
@click.argument("url")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_obj
def quick(settings: Settings, url: str, timeout: float | None, json_output: bool):
    """Run a presence-only quick check on a URL."""
    url = normalize_url(url)
    extractor = _extractor(settings, timeout)

    with console.status(f"[bold blue]Checking {url}...[/bold blue]"):
        try:
            report = quick_check(normalize(extractor.extract(url), url=url))
        except ExtractionError as e:
            console.print(f"[red]Quick check failed:[/red] {e.reason}")
            sys.exit(1)

    if json_output:
        _echo_json(quick_report_to_dict(report))
    else:
        print_quick_report(report)


@cli.command("score")
@click.argument("extraction", type=click.File("r"))
@click.option("--url", default=None, help="Page URL (default: the file's 'url' field)")
@click.option("-v", "--verbose", is_flag=True, help="Show all issues and recommendations")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@rubric_option
def score_file(extraction, url: str | None, verbose: bool, json_output: bool, rubric_name: str):
    """Score a saved extraction result (JSON file, or - for stdin).

    \b
    Examples:
        seo-scorecard score page.json
        cat page.json | seo-scorecard score - --url https://example.com
    """
    try:
        raw = json.load(extraction)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="EXTRACTION")

    report = score(normalize(raw, url=url), RUBRICS[rubric_name])

    if json_output:
        _echo_json(report_to_dict(report))
    else:
        print_report(report, verbose=verbose)


@cli.command()
@click.argument("urls_file", type=click.File("r"))
@click.option("-d", "--delay", type=float, default=None,
              help="Seconds between extraction calls (default: SEO_SCORECARD_REQUEST_DELAY)")
@click.option("-w", "--workers", default=1, show_default=True, help="Parallel extraction workers")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--save", is_flag=True, help="Save the comparative report to the report directory")
@rubric_option
@click.pass_obj
def batch(settings: Settings, urls_file, delay: float | None, workers: int, timeout: float | None,
          json_output: bool, save: bool, rubric_name: str):
    """Score every URL in a file (one per line).

    \b
    Examples:
        seo-scorecard batch urls.txt
        seo-scorecard batch urls.txt --delay 0 --workers 4 --save
    """
    urls = read_url_list(urls_file.read())
    if not urls:
        raise click.UsageError("No URLs found in file")

    delay = settings.request_delay if delay is None else delay
    analyzer = BatchAnalyzer(
        _extractor(settings, timeout),
        rubric=RUBRICS[rubric_name],
        throttle=FixedDelay(delay) if delay > 0 else NoThrottle(),
        max_workers=workers,
    )

    with console.status(f"[bold blue]Analyzing {len(urls)} URLs...[/bold blue]"):
        result = analyzer.run(urls)

    payload = batch_to_dict(result)
    if save:
        path = save_report(payload, "batch-analysis", settings.report_directory)
        click.echo(f"📄 Report saved: {path}", err=True)

    if json_output:
        _echo_json(payload)
    else:
        print_batch(result)


# Convenience: allow `seo-scorecard URL` as shortcut for `seo-scorecard scan URL`
def main():
    """Entry point that handles both `seo-scorecard URL` and `seo-scorecard scan URL`."""
    args = sys.argv[1:]

    if args and not args[0].startswith('-') and args[0] not in cli.commands:
        if '.' in args[0] or args[0] == 'localhost':
            sys.argv.insert(1, 'scan')

    cli()


if __name__ == "__main__":
    main()
