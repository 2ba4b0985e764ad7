"""Main Typer application for brdoc-validator."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from brdoc_validator import __version__
from brdoc_validator.cli.console import (
    configure_logging,
    console,
    print_error,
    print_success,
)
from brdoc_validator.core.models import DocumentKind, ValidationResult
from brdoc_validator.core.rules.document_rules import CNPJ_LENGTH
from brdoc_validator.core.services import (
    describe_error,
    describe_success,
    limit_input,
    require_valid,
    validate_document,
)
from brdoc_validator.shared.exceptions import DocumentValidationError, InputTooLongError
from brdoc_validator.shared.formatters import format_cnpj, format_cpf, mask_cnpj, mask_cpf
from brdoc_validator.shared.normalizer import normalize

app = typer.Typer(
    name="brdoc",
    help="Validação e formatação de CPF e CNPJ",
    add_completion=False,
    no_args_is_help=True,
)

FORMATOS_SAIDA = ("table", "json", "plain")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"brdoc-validator v{__version__}")
        raise typer.Exit()


def _check_output(output: str, permitidos: tuple[str, ...] = FORMATOS_SAIDA) -> None:
    if output not in permitidos:
        print_error(f"Formato de saída inválido: {escape(output)} (use {', '.join(permitidos)})")
        raise typer.Exit(2)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """brdoc - Validação e formatação de CPF e CNPJ."""
    configure_logging(verbose)


@app.command()
def validar(
    documento: Annotated[str, typer.Argument(help="CPF ou CNPJ, com ou sem pontuação")],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Formato de saída: table, json, plain",
        ),
    ] = "table",
    estrito: Annotated[
        bool,
        typer.Option("--estrito", "-e", help="Falha com o motivo exato (no formato de --output)"),
    ] = False,
) -> None:
    """Valida um CPF ou CNPJ e mostra o documento formatado."""
    _check_output(output)

    try:
        limit_input(documento)
    except InputTooLongError as e:
        print_error(str(e))
        raise typer.Exit(2)

    if estrito:
        try:
            result = require_valid(documento)
        except DocumentValidationError as e:
            _display_strict_error(str(e), output)
            raise typer.Exit(1)
    else:
        result = validate_document(documento)

    if output == "json":
        console.print_json(data=result.model_dump(mode="json", by_alias=True))
    elif output == "plain":
        status = "valido" if result.is_valid else "invalido"
        typer.echo(f"{result.type.value}\t{status}\t{result.formatted}")
    else:
        _display_result(documento, result)

    if not result.is_valid:
        raise typer.Exit(1)


@app.command()
def formatar(
    documento: Annotated[str, typer.Argument(help="Dígitos do documento (parciais aceitos)")],
    tipo: Annotated[
        str,
        typer.Option("--tipo", "-t", help="Máscara a aplicar: cpf ou cnpj"),
    ] = "cpf",
) -> None:
    """Aplica a máscara de CPF ou CNPJ, mesmo a entradas incompletas."""
    tipo = tipo.lower()
    if tipo == "cpf":
        typer.echo(format_cpf(documento))
    elif tipo == "cnpj":
        typer.echo(format_cnpj(documento))
    else:
        print_error(f"Tipo inválido: {escape(tipo)} (use cpf ou cnpj)")
        raise typer.Exit(2)


@app.command()
def mascarar(
    documento: Annotated[str, typer.Argument(help="CPF ou CNPJ completo")],
) -> None:
    """Oculta o documento para exibição, mantendo os últimos dígitos."""
    if len(normalize(documento)) == CNPJ_LENGTH:
        typer.echo(mask_cnpj(documento))
    else:
        typer.echo(mask_cpf(documento))


@app.command()
def lote(
    arquivo: Annotated[
        Path,
        typer.Argument(
            help="Arquivo texto com um documento por linha",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Formato de saída: table, json",
        ),
    ] = "table",
) -> None:
    """Valida todos os documentos de um arquivo (um por linha)."""
    _check_output(output, ("table", "json"))

    try:
        with open(arquivo, "r", encoding="utf-8") as f:
            entradas = [line.strip() for line in f if line.strip()]
    except UnicodeDecodeError as e:
        print_error(f"Arquivo não está em UTF-8: {e}")
        raise typer.Exit(2)

    resultados = [(entrada, validate_document(entrada)) for entrada in entradas]
    validos = sum(1 for _, r in resultados if r.is_valid)

    if output == "json":
        payload = [
            {"entrada": entrada, **r.model_dump(mode="json", by_alias=True)}
            for entrada, r in resultados
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", style="dim", width=4)
        table.add_column("Entrada", overflow="fold")
        table.add_column("Tipo", width=8)
        table.add_column("Formatado", overflow="fold")
        table.add_column("Status")

        for i, (entrada, r) in enumerate(resultados, 1):
            status = "[valid]válido[/valid]" if r.is_valid else "[invalid]inválido[/invalid]"
            table.add_row(str(i), escape(entrada), r.type.value, escape(r.formatted), status)

        console.print(table)
        console.print(
            f"[header]Total:[/header] {len(resultados)} | "
            f"[valid]Válidos:[/valid] {validos} | "
            f"[invalid]Inválidos:[/invalid] {len(resultados) - validos}"
        )

    if validos < len(resultados):
        raise typer.Exit(1)


def _display_strict_error(motivo: str, output: str) -> None:
    """Report a strict-mode failure in the requested output format."""
    if output == "json":
        console.print_json(data={"isValid": False, "erro": motivo})
    elif output == "plain":
        typer.echo(f"erro\t{motivo}")
    else:
        print_error(escape(motivo))


def _display_result(documento: str, result: ValidationResult) -> None:
    """Show a single validation result as a panel."""
    tipo = result.type.value if result.type != DocumentKind.UNKNOWN else "-"

    console.print()
    console.print(
        Panel.fit(
            f"[header]Entrada:[/header] {escape(documento)}\n"
            f"[header]Tipo:[/header] {tipo}\n"
            f"[header]Formatado:[/header] {escape(result.formatted)}",
            title="brdoc - Documento",
            border_style="green" if result.is_valid else "red",
        )
    )

    sucesso = describe_success(result)
    if sucesso:
        print_success(f"{sucesso} ✓")
        return

    erro = describe_error(documento, result)
    if erro:
        console.print(f"[invalid]{erro} ⚠[/invalid]")
