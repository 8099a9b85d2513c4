"""Interactive terminal front-end."""
import argparse
import asyncio
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from js_lab.breakdown import KEYWORD_DEFINITIONS, find_keywords, generate_code_breakdown
from js_lab.config import LabConfig, load_config
from js_lab.models import Difficulty, RunResult
from js_lab.repository import ALL, QuestionRepository
from js_lab.session import NO_QUESTIONS_MESSAGE, AdvanceOutcome, SessionController

console = Console()

EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """Raised when the learner types 'q' or 'menu' inside a prompt."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def session_int_prompt(prompt: str, choices: list[str] | None = None) -> int:
    return int(session_prompt(prompt, choices=choices))


def show_welcome(repository: QuestionRepository):
    version = repository.metadata().get("version", "?")
    console.print(Panel(
        "[bold]JS Challenge Lab[/bold]\n"
        f"[dim]{repository.total_questions()} questions, database v{version}[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu(controller: SessionController):
    labels = ", ".join(c.label for c in controller.current_choices()) or "-"
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        (labels, "Answer with a choice letter"),
        ("run", "Write and run code"),
        ("hint", "Show a hint"),
        ("explain", "Line-by-line breakdown"),
        ("next", "Skip to the next question"),
        ("shuffle", "Shuffle questions"),
        ("filter", "Change topic or difficulty"),
        ("stats", "Question database statistics"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def render_question(controller: SessionController):
    snap = controller.snapshot()
    question = controller.current_question()
    status = f"Score [bold]{snap.score}[/bold]  |  Streak [bold]{snap.streak}[/bold]"
    if question is None:
        console.print(Panel(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]", subtitle=status))
        return
    console.print(Panel(
        escape(question.question),
        title=f"Question {snap.cursor + 1}/{snap.total}: {question.category} ({question.difficulty.label})",
        subtitle=status,
        border_style="cyan",
    ))
    if question.code:
        console.print(Syntax(question.code, "javascript", line_numbers=True))
    for choice in controller.current_choices():
        text = choice.text.replace("\n", " / ")
        console.print(f"  [cyan]{choice.label})[/cyan] {escape(text)}")


def render_run_result(result: RunResult, points: int = 10):
    color = "green" if result.is_correct else "red"
    console.print(Panel(Text(result.output or "(no output)"), title="Output", border_style=color))
    if result.is_correct:
        console.print(f"[green]Correct! +{points} points[/green]")
    elif not result.error:
        console.print(Panel(Text(result.expected), title="Expected", border_style="dim"))


async def cmd_answer(controller: SessionController, label: str):
    judgment = controller.select_choice(label)
    if judgment.message:
        console.print(f"[yellow]{judgment.message}[/yellow]")
        return
    if not judgment.is_correct:
        console.print("[red]Not quite right. Try again![/red]")
        return
    console.print("[green]Correct! Moving to next question...[/green]")
    if judgment.explanation:
        console.print(f"[dim]{escape(judgment.explanation)}[/dim]")
    if controller.advance_pending:
        with console.status("Next question..."):
            await asyncio.sleep(controller.config.auto_advance_delay)
        if controller.last_auto_advance is AdvanceOutcome.COMPLETED:
            console.print(f"[green]Great job! You've completed all {controller.snapshot().total} questions in this topic![/green]")


def cmd_run(controller: SessionController):
    question = controller.current_question()
    if question is None:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")
        return
    console.print("[dim]Type your code; an empty line runs it. Enter nothing to run the starter code.[/dim]")
    lines = []
    while True:
        line = session_prompt("[cyan]js[/cyan]", default="", show_default=False)
        if not line:
            break
        lines.append(line)
    result = controller.run_code("\n".join(lines) or question.code)
    render_run_result(result, controller.config.points_per_correct)


def cmd_hint(controller: SessionController):
    question = controller.current_question()
    if question is None:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")
    elif question.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(question.hint)}")
    else:
        console.print("[dim]No hint for this question.[/dim]")


def cmd_explain(controller: SessionController):
    question = controller.current_question()
    if question is None:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")
        return
    steps = generate_code_breakdown(question.code)
    if steps:
        table = Table(title="Code Breakdown")
        table.add_column("Line", justify="right")
        table.add_column("Code", style="cyan")
        table.add_column("What happens")
        for step in steps:
            table.add_row(str(step.line_number), Text(step.code), Text(step.explanation))
        console.print(table)
    for keyword in find_keywords(question.question + " " + question.explanation):
        console.print(f"  [bold]{keyword}[/bold]: {KEYWORD_DEFINITIONS[keyword]}")


def cmd_next(controller: SessionController):
    outcome = controller.advance()
    if outcome is AdvanceOutcome.COMPLETED:
        console.print(f"[green]Great job! You've completed all {controller.snapshot().total} questions in this topic![/green]")
    elif outcome is AdvanceOutcome.NO_QUESTIONS:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")


def cmd_shuffle(controller: SessionController):
    if controller.reshuffle_current_set():
        console.print("[cyan]Questions shuffled! Starting fresh...[/cyan]")
    else:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")


def cmd_filter(controller: SessionController):
    categories = controller.repository.categories
    console.print("  [cyan]0[/cyan]) All topics")
    for i, category in enumerate(categories, 1):
        console.print(f"  [cyan]{i}[/cyan]) {category.name}")
    index = session_int_prompt("Select topic", choices=[str(i) for i in range(len(categories) + 1)])
    category = ALL if index == 0 else categories[index - 1].id
    difficulty = session_prompt(
        "Difficulty", choices=[ALL] + [d.label for d in Difficulty], default=ALL,
    )
    count = controller.select_filters(category, difficulty)
    if count:
        console.print(f"[green]{count} questions ready.[/green]")
    else:
        console.print(f"[yellow]{NO_QUESTIONS_MESSAGE}[/yellow]")


def cmd_stats(controller: SessionController):
    stats = controller.repository.statistics()
    table = Table(title=f"Question Database ({stats['total']} questions)")
    table.add_column("Topic", style="cyan")
    table.add_column("Questions", justify="right")
    for category in controller.repository.categories:
        table.add_row(category.name, str(stats["by_category"].get(category.id, 0)))
    console.print(table)
    console.print("  " + "  |  ".join(
        f"{label}: [bold]{count}[/bold]" for label, count in stats["by_difficulty"].items()
    ))


async def run_app(config: LabConfig):
    repository = QuestionRepository(config.source, timeout=config.fetch_timeout)
    with console.status("Loading questions..."):
        await repository.load()
    if repository.used_fallback:
        console.print("[yellow]Question database unavailable, using built-in questions.[/yellow]")
    controller = SessionController(repository, config=config, scheduler=asyncio.get_running_loop())
    controller.select_filters(config.default_category, config.default_difficulty)
    show_welcome(repository)

    while True:
        render_question(controller)
        show_menu(controller)
        choice = Prompt.ask("\n[bold]>[/bold]", default="next").strip().lower()
        try:
            if choice.upper() in {c.label for c in controller.current_choices()}:
                await cmd_answer(controller, choice)
            elif choice == "run":
                cmd_run(controller)
            elif choice == "hint":
                cmd_hint(controller)
            elif choice == "explain":
                cmd_explain(controller)
            elif choice == "next":
                cmd_next(controller)
            elif choice == "shuffle":
                cmd_shuffle(controller)
            elif choice == "filter":
                cmd_filter(controller)
            elif choice == "stats":
                cmd_stats(controller)
            elif choice in ("quit", "exit", "q"):
                console.print(f"[dim]Final score: {controller.snapshot().score}. Happy coding![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to the menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="js-lab", description="Practice JavaScript output questions.")
    parser.add_argument("--source", help="Question database path or http(s) URL")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    config = load_config(args.config)
    if args.source:
        config.source = args.source
    asyncio.run(run_app(config))


if __name__ == "__main__":
    main()
