"""Console rendering of a team draw."""

import os
import sys

RESET = "\033[0m"
BOLD = "\033[1m"
BLUE = "\033[34m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
PURPLE = "\033[35m"

BOX_WIDTH = 66


def supports_color(stream=None):
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) or os.environ.get("TERM") is not None


def center(text, width):
    padding = max(0, width - len(text))
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class ResultFormatter:
    """
    Builds the text report for an AssemblyResult.

    Args:
        verbose: Add the "excellent balance" remark when teams are within 1.0
        color: True/False to force ANSI colors, None to detect from the terminal
    """

    def __init__(self, verbose=False, color=None):
        self.verbose = verbose
        self.color = supports_color() if color is None else color

    def colorize(self, text, code):
        if self.color:
            return f"{code}{text}{RESET}"
        return text

    def banner(self, title):
        rule = "═" * BOX_WIDTH
        return [
            self.colorize(f"╔{rule}╗", CYAN),
            self.colorize(f"║{center(title, BOX_WIDTH)}║", CYAN),
            self.colorize(f"╚{rule}╝", CYAN),
        ]

    def team_lines(self, group, number):
        header = f"Team #{number} - {group.name}"
        lines = [
            self.colorize(f"┌─ {header} " + "─" * max(1, 60 - len(header)), BLUE),
            self.colorize(f"│ Strength: {group.aggregate_strength:.1f}", GREEN),
            self.colorize("├─ Players:", YELLOW),
        ]
        for p in group.members:
            lines.append(self.colorize(f"│   • {p.name} ({p.rating:.1f})", PURPLE))
        lines.append(self.colorize("└" + "─" * (BOX_WIDTH - 1), BLUE))
        return lines

    def summary_lines(self, result):
        groups = result.groups
        total = sum(g.aggregate_strength for g in groups)
        average = total / len(groups) if groups else 0.0
        difference = result.max_strength - result.min_strength

        if result.is_balanced:
            verdict = self.colorize(" ✅ WELL BALANCED!", GREEN)
        else:
            verdict = self.colorize(" ⚠️  Needs rebalancing", YELLOW)

        lines = [
            "",
            self.colorize("📊 SUMMARY", BOLD + CYAN),
            self.colorize("─" * 50, CYAN),
            f"Total Teams: {self.colorize(len(groups), BOLD)}",
            f"Average Team Strength: {self.colorize(f'{average:.1f}', BOLD)}",
            f"Strength Range: {self.colorize(f'{result.min_strength:.1f} - {result.max_strength:.1f}', BOLD)}",
            f"Max Difference: {self.colorize(f'{difference:.1f}', BOLD)}{verdict}",
        ]
        if self.verbose and difference < 1.0:
            lines.append(self.colorize("🎯 Excellent balance achieved - difference under 1.0!", GREEN))
        return lines

    def substitute_lines(self, result):
        if not result.unassigned:
            return []
        lines = ["", self.colorize(f"Substitutes ({len(result.unassigned)}):", YELLOW)]
        for p in result.unassigned:
            lines.append(f"  • {p.name} ({p.rating:.1f})")
        return lines

    def format(self, result):
        lines = [""]
        lines.extend(self.banner(" ⚽ TEAM DRAW RESULTS ⚽ "))
        lines.append("")
        for number, group in enumerate(result.groups, start=1):
            if number > 1:
                lines.append("")
            lines.extend(self.team_lines(group, number))
        lines.extend(self.substitute_lines(result))
        lines.extend(self.summary_lines(result))
        lines.append("")
        lines.extend(self.banner(" 🏆 GOOD LUCK WITH YOUR MATCHES! 🏆 "))
        lines.append("")
        return "\n".join(lines)


def format_results(result, verbose=False, color=None):
    return ResultFormatter(verbose=verbose, color=color).format(result)


def print_results(result, verbose=False, color=None, stream=None):
    print(format_results(result, verbose=verbose, color=color), file=stream or sys.stdout)
