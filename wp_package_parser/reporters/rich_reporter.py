"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wp_package_parser.archive.models import PackageResult
from wp_package_parser.core.readme import ReadmeDocument


# 包类型 -> (图标, 颜色)
TYPE_STYLES = {
    "plugin": ("🔌", "cyan"),
    "theme": ("🎨", "magenta"),
}

# 段落预览的最大长度
SECTION_PREVIEW_LENGTH = 60


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, list):
        return ", ".join(value)
    return str(value)


def _preview(content: str) -> str:
    """段落内容的单行预览"""
    first_line = content.strip().split('\n', 1)[0]
    if len(first_line) > SECTION_PREVIEW_LENGTH:
        return first_line[:SECTION_PREVIEW_LENGTH - 1] + "…"
    return first_line


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report_package(self, result: PackageResult, target: str) -> None:
        """生成 Rich 格式的包报告"""
        icon, color = TYPE_STYLES.get(result.type, ("📦", "white"))
        main_file = result.plugin_file or result.stylesheet

        content = Text()
        content.append("Type: ", style="bold")
        content.append(f"{result.type}\n", style=f"bold {color}")
        content.append("Main file: ", style="bold")
        content.append(f"{main_file}\n", style=color)
        content.append(f"Target: {target}", style="dim")

        self.console.print()
        self.console.print(Panel(
            content,
            title=f"[bold]{icon} {escape(result.header.get('Name', ''))}[/bold]",
            border_style=color,
        ))

        self._print_headers(result.header)

        if result.readme is not None:
            self._print_readme(result.readme)
        else:
            self.console.print()
            self.console.print("[yellow]Warning:[/yellow] No valid readme.txt found")

        self.console.print()

    def report_readme(self, readme: ReadmeDocument, target: str) -> None:
        """生成 Rich 格式的 readme 报告"""
        self.console.print()
        self.console.print(Panel(
            Text(target, style="dim"),
            title=f"[bold]📄 {escape(readme.name)}[/bold]",
            border_style="green",
        ))
        self._print_readme(readme)
        self.console.print()

    def _print_headers(self, header: dict[str, Any]) -> None:
        """打印元数据头"""
        self.console.print()
        self.console.print("[bold]◆ Headers[/bold]")
        self.console.print()

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Field", style="cyan", width=14)
        table.add_column("Value")

        for key, value in header.items():
            formatted = _format_value(value)
            if formatted:
                table.add_row(key, escape(formatted))

        self.console.print(table)

    def _print_readme(self, readme: ReadmeDocument) -> None:
        """打印 readme.txt 信息"""
        self.console.print()
        self.console.print("[bold]◆ readme.txt[/bold]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Field", style="cyan", width=18)
        table.add_column("Value")

        rows = [
            ("Name", readme.name),
            ("Contributors", readme.contributors),
            ("Donate link", readme.donate),
            ("Tags", readme.tags),
            ("Requires at least", readme.requires),
            ("Tested up to", readme.tested),
            ("Stable tag", readme.stable),
        ]
        for label, value in rows:
            formatted = _format_value(value)
            if formatted:
                table.add_row(label, escape(formatted))

        self.console.print(table)

        if readme.short_description:
            self.console.print()
            self.console.print(f"  [italic]{escape(readme.short_description)}[/italic]")

        if readme.sections:
            self.console.print()
            self.console.print(f"[bold]◆ Sections[/bold] [dim]({len(readme.sections)})[/dim]")
            self.console.print()
            for i, (title, content) in enumerate(readme.sections.items(), 1):
                self.console.print(f"  {i}. [green]{escape(title)}[/green]", highlight=False)
                if content:
                    self.console.print(f"     [dim]{escape(_preview(content))}[/dim]", highlight=False)
