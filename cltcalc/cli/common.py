"""Options and helpers shared by CLI commands."""

import dataclasses
import json
from typing import Any, Optional

import click
from pydantic import BaseModel, ValidationError

from cltcalc.sdk import ConfigNotFoundError, TaxRules, TaxRulesNotFoundError, get_setting, load_tax_rules

OUTPUT_FORMATS = ["table", "json"]


def format_option(func):
    """--format table|json, defaulting to the default_output_format setting."""
    return click.option(
        "--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
        help="Output format (default: table, or the default_output_format setting)",
    )(func)


def year_option(func):
    """--year for the tax tables."""
    return click.option(
        "--year", "-y", type=int, default=None,
        help="Tax table year (default: tax_year setting or newest available)",
    )(func)


def resolve_format(output_format: Optional[str]) -> str:
    if output_format:
        return output_format
    try:
        configured = get_setting("default_output_format")
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))
    return configured if configured in OUTPUT_FORMATS else "table"


def load_rules(year: Optional[int]) -> TaxRules:
    """Load tax tables, turning SDK errors into CLI errors."""
    try:
        return load_tax_rules(year)
    except TaxRulesNotFoundError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        raise click.ClickException(f"Tax tables for {year or 'default year'} are malformed:\n{e}")
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))


def to_jsonable(obj: Any) -> Any:
    """Convert pydantic models and dataclasses to JSON-ready structures."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj):
        return dataclasses.asdict(obj)
    return obj


def echo_json(obj: Any) -> None:
    click.echo(json.dumps(to_jsonable(obj), indent=2, default=str, ensure_ascii=False))
