"""CLI entry point for artifacts-api."""

import json
import logging
import re
from pathlib import Path

import click
import yaml

from artifacts_api.correlation import response_schema
from artifacts_api.endpoints import ENDPOINTS
from artifacts_api.errors import ArtifactsApiError
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import RATE_LIMITS
from artifacts_api.request import API_BASE_URL, RequestDescriptor

REDACTED = "<redacted>"

_INTEGER = re.compile(r"-?\d+")


def _parse_params(params: tuple[str, ...], params_file: Path | None) -> dict:
    """Merge ``--params-file`` with ``-p`` options (options win).

    ``key=value`` passes a string, ``key:=value`` passes an integer.
    """
    values = {}
    if params_file is not None:
        try:
            loaded = yaml.safe_load(params_file.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise click.BadParameter(f"not valid YAML/JSON: {e}", param_hint="--params-file") from e
        if not isinstance(loaded, dict):
            raise click.BadParameter("must contain a mapping of parameters", param_hint="--params-file")
        values.update(loaded)

    for item in params:
        key, sep, raw = item.partition("=")
        if not sep or not key.rstrip(":"):
            raise click.BadParameter(f"expected key=value or key:=number, got {item!r}", param_hint="--param")
        if key.endswith(":"):
            if not _INTEGER.fullmatch(raw):
                raise click.BadParameter(f"{key[:-1]} expects an integer, got {raw!r}", param_hint="--param")
            values[key[:-1]] = int(raw)
        else:
            values[key] = raw
    return values


def _describe(request: RequestDescriptor, base_url: str) -> dict:
    headers = {
        name: REDACTED if name.lower() == "authorization" else value
        for name, value in request.headers
    }
    return {
        "operation": request.operation.value,
        "method": request.method.value,
        "url": base_url.rstrip("/") + request.path,
        "headers": headers,
        "body": json.loads(request.body) if request.body else None,
        "rate_limit": request.rate_limit.id,
        "response_schema": response_schema(request.operation).__name__,
    }


def _dump(data, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip()
    return json.dumps(data, indent=2, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every encoded request.")
def main(verbose: bool):
    """Artifacts API request builder: validate input and print request descriptors."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
def operations():
    """List operations and the response shape each one decodes to."""
    for operation in Operation:
        click.echo(f"{operation.value:<20} {response_schema(operation).__name__}")


@main.command("rate-limits")
def rate_limits():
    """List rate limit categories and their thresholds."""
    for limit in RATE_LIMITS.values():
        thresholds = ", ".join(str(t) for t in limit.thresholds)
        click.echo(f"{limit.id:<18} by {limit.by.value:<4} {thresholds}")


@main.command()
@click.argument("operation", type=click.Choice([op.value for op in Operation]))
@click.option("-p", "--param", "params", multiple=True, help="Builder parameter as key=value (repeatable).")
@click.option("--params-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML/JSON file with builder parameters.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--base-url", default=API_BASE_URL, envvar="ARTIFACTS_API_BASE_URL", show_default=True, help="API root the request URL is printed against.")
def build(operation: str, params: tuple[str, ...], params_file: Path | None, fmt: str, base_url: str):
    """Validate parameters and print the request OPERATION would send."""
    values = _parse_params(params, params_file)
    endpoint = ENDPOINTS[Operation(operation)]
    try:
        request = endpoint.build(**values)
    except ArtifactsApiError as e:
        raise click.ClickException(str(e)) from e
    except TypeError as e:
        raise click.UsageError(f"bad parameters for {operation}: {e}") from e

    click.echo(_dump(_describe(request, base_url), fmt))


@main.command()
@click.argument("operation", type=click.Choice([op.value for op in Operation]))
def schema(operation: str):
    """Print the JSON schema of the response OPERATION decodes to."""
    model = response_schema(Operation(operation))
    click.echo(json.dumps(model.model_json_schema(), indent=2))
