"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import click

from schema_algebra.deep_transform import TransformRule, deep_transform
from schema_algebra.key_set_algebra import (
    complement,
    intersect,
    key_union,
    subtract,
    symmetric_difference,
)
from schema_algebra.merging import merge, merge_exclusive, merge_override
from schema_algebra.projection import omit_by_key, omit_by_value, pick_by_key, pick_by_value
from schema_algebra.schema_declarations import (
    OUTPUT_FORMATS,
    DeclarationError,
    SchemaCatalog,
    format_schema,
    load_declarations,
)
from schema_algebra.schema_model import (
    PrimitiveKind,
    Schema,
    SchemaAlgebraError,
    ShapePredicate,
    is_callable,
    of_kinds,
)

LOGGER = logging.getLogger(__name__)

_KEY_OPERATIONS = {
    "intersect": intersect,
    "subtract": subtract,
    "complement": complement,
    "symmetric-difference": symmetric_difference,
    "union": key_union,
}
_DEEP_RULES = {
    "readonly": TransformRule.READONLY,
    "partial": TransformRule.PARTIAL,
    "required": TransformRule.REQUIRED,
    "non-nullable": TransformRule.NON_NULLABLE,
}
_MERGE_MODES = {
    "override": merge_override,
    "assign": merge,
    "exclusive": merge_exclusive,
}


class CliError(Exception):
    """Custom CLI error."""


def _declarations_option(command: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--declarations",
        "declarations_path",
        required=True,
        type=click.Path(path_type=str),
        help="Path to YAML/JSON schema declaration file",
    )(command)


def _format_option(command: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--format",
        "output_format",
        required=False,
        default="yaml",
        show_default=True,
        type=click.Choice(OUTPUT_FORMATS),
        help="Output representation of the derived schema",
    )(command)


def _value_predicate_options(command: Callable[..., Any]) -> Callable[..., Any]:
    command = click.option(
        "--callable",
        "match_callable",
        is_flag=True,
        default=False,
        help="Match fields whose shape is a callable.",
    )(command)
    return click.option(
        "--kind",
        "kinds",
        multiple=True,
        type=click.Choice([kind.value for kind in PrimitiveKind]),
        help="Match fields whose shape is assignable to these primitive kinds.",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-algebra")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Derive schemas by projection, deep transforms and merges."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="keys")
@click.argument("operation", type=click.Choice(list(_KEY_OPERATIONS)))
@click.argument("left")
@click.argument("right")
@_declarations_option
def keys(operation: str, left: str, right: str, declarations_path: str) -> None:
    """Print the field names resulting from a key-set operation."""
    catalog = _load(declarations_path)
    try:
        names = _KEY_OPERATIONS[operation](catalog.get_record(left), catalog.get_record(right))
    except (DeclarationError, SchemaAlgebraError) as exc:
        raise CliError(str(exc)) from exc
    for name in sorted(names):
        click.echo(name)


@cli.command(name="pick")
@click.argument("schema_name")
@click.option("--key", "-k", "names", multiple=True, required=True, help="Field name to keep")
@_declarations_option
@_format_option
def pick(
    schema_name: str, names: tuple[str, ...], declarations_path: str, output_format: str
) -> None:
    """Keep only the named fields; every name must exist."""
    _derive(
        declarations_path,
        output_format,
        lambda catalog: pick_by_key(catalog.get(schema_name), names),
    )


@cli.command(name="omit")
@click.argument("schema_name")
@click.option("--key", "-k", "names", multiple=True, required=True, help="Field name to drop")
@_declarations_option
@_format_option
def omit(
    schema_name: str, names: tuple[str, ...], declarations_path: str, output_format: str
) -> None:
    """Drop the named fields; unknown names are ignored."""
    _derive(
        declarations_path,
        output_format,
        lambda catalog: omit_by_key(catalog.get(schema_name), names),
    )


@cli.command(name="pick-by-value")
@click.argument("schema_name")
@_value_predicate_options
@_declarations_option
@_format_option
def pick_values(
    schema_name: str,
    kinds: tuple[str, ...],
    match_callable: bool,
    declarations_path: str,
    output_format: str,
) -> None:
    """Keep the fields whose shape matches the given kinds."""
    predicate = _build_predicate(kinds, match_callable)
    _derive(
        declarations_path,
        output_format,
        lambda catalog: pick_by_value(catalog.get(schema_name), predicate),
    )


@cli.command(name="omit-by-value")
@click.argument("schema_name")
@_value_predicate_options
@_declarations_option
@_format_option
def omit_values(
    schema_name: str,
    kinds: tuple[str, ...],
    match_callable: bool,
    declarations_path: str,
    output_format: str,
) -> None:
    """Drop the fields whose shape matches the given kinds."""
    predicate = _build_predicate(kinds, match_callable)
    _derive(
        declarations_path,
        output_format,
        lambda catalog: omit_by_value(catalog.get(schema_name), predicate),
    )


@cli.command(name="deep")
@click.argument("rule", type=click.Choice(list(_DEEP_RULES)))
@click.argument("schema_name")
@_declarations_option
@_format_option
def deep(rule: str, schema_name: str, declarations_path: str, output_format: str) -> None:
    """Apply a deep transform rule at every nesting depth."""
    _derive(
        declarations_path,
        output_format,
        lambda catalog: deep_transform(catalog.get(schema_name), _DEEP_RULES[rule]),
    )


@cli.command(name="merge")
@click.argument("mode", type=click.Choice(list(_MERGE_MODES)))
@click.argument("left")
@click.argument("right")
@_declarations_option
@_format_option
def merge_schemas(
    mode: str, left: str, right: str, declarations_path: str, output_format: str
) -> None:
    """Merge two record schemas."""
    _derive(
        declarations_path,
        output_format,
        lambda catalog: _MERGE_MODES[mode](catalog.get(left), catalog.get(right)),
    )


def _build_predicate(kinds: tuple[str, ...], match_callable: bool) -> ShapePredicate:
    if not kinds and not match_callable:
        raise click.UsageError("Provide at least one --kind or --callable.")
    matches_kinds = of_kinds(*kinds) if kinds else None

    def _predicate(shape: Schema) -> bool:
        if match_callable and is_callable(shape):
            return True
        return matches_kinds is not None and matches_kinds(shape)

    return _predicate


def _load(declarations_path: str) -> SchemaCatalog:
    try:
        return load_declarations(declarations_path)
    except (DeclarationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _derive(
    declarations_path: str,
    output_format: str,
    derivation: Callable[[SchemaCatalog], Schema],
) -> None:
    catalog = _load(declarations_path)
    try:
        derived = derivation(catalog)
    except (DeclarationError, SchemaAlgebraError) as exc:
        raise CliError(str(exc)) from exc
    LOGGER.debug("Derived %s schema", type(derived).__name__)
    click.echo(format_schema(derived, output_format))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
