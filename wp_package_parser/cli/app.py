"""
CLI 入口模块 - 使用 Typer 构建命令行界面

命令：
1. inspect: 解析插件/主题 ZIP 包
2. readme: 解析单个 readme.txt
3. meta: 输出更新检查器元数据
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from wp_package_parser.archive import ArchiveEntry, ScanConfig, parse_package
from wp_package_parser.archive.models import DEFAULT_HEADER_BYTES, DEFAULT_MAX_DEPTH
from wp_package_parser.core import decode_text, parse_readme
from wp_package_parser.metadata import get_plugin_package_meta
from wp_package_parser.reporters import JsonReporter, RichReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="wp-package-parser",
    help="Extract metadata from WordPress plugin and theme packages without running them.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _get_reporter(format: str):
    """获取对应的报告器"""
    if format == "json":
        return JsonReporter()
    if format == "rich":
        return RichReporter(console)
    console.print(f"[red]Error:[/red] Unknown format: {format}")
    raise typer.Exit(2)


def _require_file(path: Path) -> None:
    if not path.exists():
        console.print(f"[red]Error:[/red] Path does not exist: {path}")
        raise typer.Exit(1)
    if not path.is_file():
        console.print(f"[red]Error:[/red] Path is not a file: {path}")
        raise typer.Exit(1)


@app.command()
def inspect(
    archive: Path = typer.Argument(
        ...,
        help="Path to a plugin or theme ZIP package",
    ),
    markdown: bool = typer.Option(
        False,
        "--markdown",
        "-m",
        help="Render readme.txt sections to HTML",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH,
        "--max-depth",
        help="Ignore files nested deeper than this many directories",
    ),
    header_bytes: int = typer.Option(
        DEFAULT_HEADER_BYTES,
        "--header-bytes",
        help="Number of bytes to read from plugin and theme files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Detect the package type and extract its headers and readme.txt.

    Examples:
        wp-package-parser inspect my-plugin.zip
        wp-package-parser inspect my-theme.zip --format json
        wp-package-parser inspect my-plugin.zip -m -v
    """
    _configure_logging(verbose)
    _require_file(archive)
    reporter = _get_reporter(format)

    config = ScanConfig(max_depth=max_depth, header_bytes=header_bytes)

    on_entry = None
    if verbose:
        def on_entry(entry: ArchiveEntry) -> None:
            console.print(f"[dim]  {entry.name} ({entry.size} bytes)[/dim]", highlight=False)

        console.print(f"[dim]Scanning {archive}...[/dim]")

    result = parse_package(archive, markdown, config=config, on_entry=on_entry)
    if result is None:
        console.print("[red]Error:[/red] No WordPress plugin or theme found in package")
        raise typer.Exit(1)

    reporter.report_package(result, str(archive))


@app.command()
def readme(
    path: Path = typer.Argument(
        ...,
        help="Path to a readme.txt file",
    ),
    markdown: bool = typer.Option(
        False,
        "--markdown",
        "-m",
        help="Render sections to HTML",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
) -> None:
    """Parse a standalone readme.txt file."""
    _require_file(path)
    reporter = _get_reporter(format)

    try:
        content = decode_text(path.read_bytes())
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to read {path}: {e}")
        raise typer.Exit(1)

    document = parse_readme(content, markdown)
    if document is None:
        console.print("[red]Error:[/red] Not a valid readme.txt (missing '=== Name ===' title)")
        raise typer.Exit(1)

    reporter.report_readme(document, str(path))


@app.command()
def meta(
    archive: Path = typer.Argument(
        ...,
        help="Path to a plugin ZIP package",
    ),
) -> None:
    """Print plugin update checker metadata as JSON."""
    _require_file(archive)

    result = parse_package(archive, True)
    if result is None:
        console.print("[red]Error:[/red] No WordPress plugin or theme found in package")
        raise typer.Exit(1)

    JsonReporter().report_meta(get_plugin_package_meta(result))


@app.command()
def version() -> None:
    """Show the version of WP-Package-Parser."""
    from wp_package_parser import __version__
    console.print(f"[bold]WP-Package-Parser[/bold] v{__version__}")


if __name__ == "__main__":
    app()
