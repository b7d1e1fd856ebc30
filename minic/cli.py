"""
Command-line front end for MiniC.

    minic check program.c [--tokens] [--ast] [--symbols] [--json]
    minic tokens program.c

`-` reads the program from stdin. `check` exits with status 1 when the
program has errors.
"""

import logging
from typing import List

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from . import __version__
from .compiler import Compiler, AnalysisResult
from .export import result_to_json, node_label
from .lexer import Token
from .parser import ASTNode
from .analyzer import Scope

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _token_table(tokens: List[Token]) -> Table:
    table = Table(title="Tokens")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Lexeme")
    table.add_column("Line", justify="right")
    for index, token in enumerate(tokens, 1):
        table.add_row(str(index), token.type.name, Text(token.lexeme), str(token.line))
    return table


def _symbol_table(scopes: List[Scope]) -> Table:
    table = Table(title="Symbol table")
    table.add_column("Scope")
    table.add_column("Depth", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Initialized")
    table.add_column("Line", justify="right")
    for scope in scopes:
        for symbol in scope.symbols.values():
            table.add_row(
                scope.kind.value,
                str(scope.depth),
                symbol.name,
                symbol.type.value,
                "yes" if symbol.initialized else "no",
                str(symbol.declared_at_line),
            )
    return table


def _ast_tree(node: ASTNode, parent: Tree = None) -> Tree:
    label = Text(node_label(node))
    branch = Tree(label) if parent is None else parent.add(label)
    for child in node.children():
        _ast_tree(child, branch)
    return branch


def _print_diagnostics(console: Console, result: AnalysisResult) -> None:
    for message in result.errors:
        console.print(Text(message, style="bold red"))
    for message in result.warnings:
        console.print(Text(message, style="yellow"))
    if not result.errors and not result.warnings:
        console.print(Text("No errors or warnings.", style="green"))


@click.group()
@click.version_option(__version__, prog_name="minic")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="MINIC_LOG_LEVEL",
    show_default=True,
    help="Logging level (also read from MINIC_LOG_LEVEL).",
)
def main(log_level: str):
    """MiniC front end: lexing, parsing and semantic analysis."""
    _configure_logging(log_level)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--tokens", "show_tokens", is_flag=True, help="Print the token table.")
@click.option("--ast", "show_ast", is_flag=True, help="Print the syntax tree.")
@click.option("--symbols", "show_symbols", is_flag=True, help="Print the symbol table.")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_context
def check(ctx, source, show_tokens, show_ast, show_symbols, as_json):
    """Analyze SOURCE and report errors and warnings."""
    result = Compiler(source.name).analyze(source.read())

    if as_json:
        click.echo(result_to_json(result))
    else:
        console = Console(soft_wrap=True)
        if show_tokens:
            console.print(_token_table(result.tokens))
        if show_ast:
            if result.ast is not None:
                console.print(_ast_tree(result.ast))
            else:
                console.print(Text("No syntax tree (analysis stopped on a fatal error).", style="red"))
        if show_symbols:
            console.print(_symbol_table(result.symbol_table))
        _print_diagnostics(console, result)

    if result.has_errors():
        ctx.exit(1)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def tokens(ctx, source):
    """Print the tokens of SOURCE."""
    result = Compiler(source.name).analyze(source.read())

    console = Console(soft_wrap=True)
    console.print(_token_table(result.tokens))
    lexical = [d for d in result.diagnostics if d.category == "lexical"]
    for diagnostic in lexical:
        console.print(Text(str(diagnostic), style="bold red"))

    if lexical:
        ctx.exit(1)


if __name__ == "__main__":
    main()
