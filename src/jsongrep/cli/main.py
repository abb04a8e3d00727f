"""jsongrep CLI entry point."""

import sys

import click

from .. import __version__
from ..config import load_settings
from ..core.streaming import grep_stream
from ..exceptions import JsonGrepError, OptionError


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("input", type=click.File("r"), default="-", required=False)
@click.option(
    "-r",
    "--raw-query",
    envvar="JSONGREP_QUERY",
    help="Query description as JSON text ($JSONGREP_QUERY).",
)
@click.option(
    "-q",
    "--query-file",
    type=click.Path(dir_okay=False),
    envvar="JSONGREP_QUERY_FILE",
    help="Read the query description from a file ($JSONGREP_QUERY_FILE).",
)
@click.option(
    "-k",
    "--raw-sort",
    envvar="JSONGREP_SORT",
    help="Sort description as JSON text ($JSONGREP_SORT).",
)
@click.option(
    "-s",
    "--sort-file",
    type=click.Path(dir_okay=False),
    envvar="JSONGREP_SORT_FILE",
    help="Read the sort description from a file ($JSONGREP_SORT_FILE).",
)
@click.version_option(__version__, prog_name="jsongrep")
def cli(input, raw_query, query_file, raw_sort, sort_file):
    """Grep NDJSON by a structural query.

    Reads JSON documents one per line from INPUT (default: stdin) and
    writes the lines whose value at the query's pointer satisfies the
    query's condition. Lines that are not JSON, or where the pointer or
    condition does not apply, are reported on stderr as
    "line N: <reason>" and processing continues.

    Query description:

    \b
        {"query": {"type": "raw", "pair": {
          "p": "/s",
          "cond": {"type": "match", "mtype": "regex",
                   "value": {"type": "string", "value": "[sS]irius"}}}}}

    Condition types: match (mtype exact, regex, contain), eq, gt, lt.
    Value types: null, bool, int, float, number, string, array, object.

    Sort description (last key is the primary order):

    \b
        {"sort": [{"p": "/i", "ord": "desc"}]}

    Examples:

    \b
        # Lines whose /s contains "sirius" or "Sirius"
        cat stars.ndjson | jsongrep -r "$QUERY"

    \b
        # Same, sorted by /i descending
        jsongrep -q query.json -k '{"sort":[{"p":"/i","ord":"desc"}]}' stars.ndjson
    """
    try:
        settings = load_settings(
            raw_query=raw_query,
            query_file=query_file,
            raw_sort=raw_sort,
            sort_file=sort_file,
        )
    except OptionError as e:
        raise click.UsageError(str(e))
    except (JsonGrepError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    grep_stream(
        input,
        sys.stdout,
        settings.query,
        sorter=settings.make_sorter(),
        error_stream=sys.stderr,
    )


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
