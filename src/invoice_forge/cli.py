"""
Command line entry point for Invoice Forge.

Every command that reads an invoice goes through the same boundaries as
any other caller (share link, store, import), so a bad input never
crashes the command: it prints the status, falls back to the example,
and exits with code 1.
"""

import argparse
import os
import sys
from typing import Sequence

from invoice_forge.codec import (
    encode_token,
    load_invoice_from_url,
    load_shared_invoice,
    share_url,
)
from invoice_forge.data import example_invoice
from invoice_forge.exchange import (
    export_invoice_file,
    export_invoice_json,
    import_invoice_file,
    import_invoice_json,
)
from invoice_forge.lib import logs
from invoice_forge.models import LoadResult
from invoice_forge.services import get_invoice_store
from invoice_forge.totals import calculate_totals, line_total

LOG = logs.logger(__file__)

DEFAULT_SHARE_URL = os.getenv("INVOICE_FORGE_SHARE_URL", "http://localhost:3000/")


def _read_input(source: str | None) -> LoadResult:
    """Load an invoice from a file path, or stdin for ``-``/None."""
    if source in (None, "-"):
        return import_invoice_json(sys.stdin.read())
    return import_invoice_file(source)


def _report(result: LoadResult) -> int:
    """Print the load status to stderr and map the outcome to an exit code."""
    if result.status:
        print(result.status, file=sys.stderr)
    return 0 if result.ok else 1


def _cmd_example(args: argparse.Namespace) -> int:
    print(export_invoice_json(example_invoice()))
    return 0


def _cmd_totals(args: argparse.Namespace) -> int:
    result = _read_input(args.file)
    invoice = result.invoice
    totals = calculate_totals(invoice)
    for item in invoice.items:
        print(f"{item.description or '-'}\t{totals.format(line_total(item))}")
    print(f"Subtotal\t{totals.format(totals.subtotal)}")
    print(f"Tax ({invoice.tax_rate_pct}%)\t{totals.format(totals.tax)}")
    print(f"Total\t{totals.format(totals.total)}")
    return _report(result)


def _cmd_share(args: argparse.Namespace) -> int:
    result = _read_input(args.file)
    if args.token_only:
        print(encode_token(result.invoice))
    else:
        print(share_url(args.base_url, result.invoice))
    return _report(result)


def _cmd_open(args: argparse.Namespace) -> int:
    target = args.link
    if "://" in target or "?" in target:
        result = load_invoice_from_url(target)
    else:
        result = load_shared_invoice(target)
    print(export_invoice_json(result.invoice))
    return _report(result)


def _cmd_save(args: argparse.Namespace) -> int:
    result = _read_input(args.file)
    if not result.ok:
        return _report(result)
    with get_invoice_store(args.store) as store:
        print(store.save(result.invoice), file=sys.stderr)
    return 0


def _cmd_load(args: argparse.Namespace) -> int:
    with get_invoice_store(args.store) as store:
        result = store.load()
    print(export_invoice_json(result.invoice))
    return _report(result)


def _cmd_export(args: argparse.Namespace) -> int:
    with get_invoice_store(args.store) as store:
        result = store.load()
    if not result.ok:
        return _report(result)
    path = export_invoice_file(result.invoice, args.path)
    print(f"Exported invoice to {path}.", file=sys.stderr)
    return 0


def _cmd_import(args: argparse.Namespace) -> int:
    result = import_invoice_file(args.path)
    if result.ok:
        with get_invoice_store(args.store) as store:
            store.save(result.invoice)
    return _report(result)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="invoice-forge",
        description="Build, total, share and store invoices.",
    )
    parser.add_argument(
        "--store",
        default=None,
        help="Store kind for save/load/export/import (disk or memory).",
    )
    subparsers = parser.add_subparsers(
        dest="command", metavar="command", required=True
    )

    example = subparsers.add_parser(
        "example", help="Print the example invoice as JSON."
    )
    example.set_defaults(handler=_cmd_example)

    totals = subparsers.add_parser("totals", help="Print line, tax and grand totals.")
    totals.add_argument("file", nargs="?", help="Invoice JSON file, stdin if omitted.")
    totals.set_defaults(handler=_cmd_totals)

    share = subparsers.add_parser("share", help="Print a share link for an invoice.")
    share.add_argument("file", nargs="?", help="Invoice JSON file, stdin if omitted.")
    share.add_argument(
        "--base-url", default=DEFAULT_SHARE_URL, help="URL to attach the token to."
    )
    share.add_argument(
        "--token-only", action="store_true", help="Print only the token."
    )
    share.set_defaults(handler=_cmd_share)

    open_ = subparsers.add_parser("open", help="Decode a share link or token to JSON.")
    open_.add_argument("link", help="Share URL or bare token.")
    open_.set_defaults(handler=_cmd_open)

    save = subparsers.add_parser("save", help="Save an invoice to the local store.")
    save.add_argument("file", nargs="?", help="Invoice JSON file, stdin if omitted.")
    save.set_defaults(handler=_cmd_save)

    load = subparsers.add_parser("load", help="Print the saved invoice as JSON.")
    load.set_defaults(handler=_cmd_load)

    export = subparsers.add_parser("export", help="Write the saved invoice to a file.")
    export.add_argument("path", help="Destination JSON file.")
    export.set_defaults(handler=_cmd_export)

    import_ = subparsers.add_parser("import", help="Import a JSON file into the store.")
    import_.add_argument("path", help="Source JSON file.")
    import_.set_defaults(handler=_cmd_import)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    LOG.debug("main - command:%s", args.command)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
