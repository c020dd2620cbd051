#!/usr/bin/env python3
"""
Tracker CLI - Price Sync and State Inspection

Command-line interface for re-pricing YNAB transactions from their memos.
"""

from pathlib import Path

import click

from ..core.config import get_config, get_state_file
from ..core.currency import compute_milliunits, format_milliunits
from ..core.errors import TrackerError
from ..tracker import (
    PriceResolver,
    TrackerStateStore,
    TrackerSync,
    YahooQuoteSource,
    is_sign_consistent,
    parse_memo,
)
from ..ynab.client import YnabClient


def _resolve_state_file(state_file: str | None) -> Path:
    return Path(state_file) if state_file else get_state_file()


@click.group()
def tracker() -> None:
    """Memo-driven price tracking commands."""
    pass


@tracker.command()
@click.option("--budget", "budgets", multiple=True, help="Budget id to sync (repeatable, default: all)")
@click.option("--state-file", help="Override tracker state file")
@click.option("--dry-run", is_flag=True, help="Compute updates without sending or saving them")
@click.option("--full-refresh", is_flag=True, help="Ignore saved cursors and re-price every transaction")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def sync(
    ctx: click.Context,
    budgets: tuple[str, ...],
    state_file: str | None,
    dry_run: bool,
    full_refresh: bool,
    verbose: bool,
) -> None:
    """
    Re-price tracked transactions and push corrected amounts to YNAB.

    Examples:
      ynab-tracker tracker sync
      ynab-tracker tracker sync --budget 3fa85f64-5717-4562-b3fc-2c963f66afa6 --dry-run
      ynab-tracker tracker sync --full-refresh
    """
    config = get_config()
    verbose = verbose or bool(ctx.obj and ctx.obj.get("verbose", False))
    state_path = _resolve_state_file(state_file)

    api_token = config.ynab.api_token
    if not api_token:
        api_token = click.prompt("YNAB API token", hide_input=True)

    if verbose:
        click.echo("YNAB Price Sync")
        click.echo(f"State file: {state_path}")
        click.echo(f"Mode: {'Dry run' if dry_run else 'Apply updates'}")
        if full_refresh:
            click.echo("Full refresh: saved cursors ignored")
        click.echo()

    client = YnabClient(api_token, base_url=config.ynab.base_url, timeout=config.ynab.timeout)
    resolver = PriceResolver(YahooQuoteSource(base_url=config.quotes.base_url, timeout=config.quotes.timeout))
    tracker_sync = TrackerSync(
        client,
        TrackerStateStore(state_path),
        resolver,
        dry_run=dry_run,
        full_refresh=full_refresh,
    )

    def announce(budget_id: str) -> None:
        click.echo(f"🔄 Reconciling budget {budget_id}...")

    try:
        results = tracker_sync.run(list(budgets) or None, on_budget=announce if verbose else None)
    except (TrackerError, ValueError) as e:
        click.echo(f"❌ Sync failed: {e}", err=True)
        raise click.ClickException(str(e)) from e

    total_updates = 0
    for result in results:
        total_updates += len(result.mutations)
        if result.skipped:
            click.echo(f"  {result.budget_id}: no changes since last sync")
            continue

        click.echo(
            f"  {result.budget_id}: {result.fetched} changed, {result.tracked} tracked, "
            f"{len(result.mutations)} updates"
        )
        if verbose:
            for mutation in result.mutations:
                click.echo(f"    {mutation.id} {mutation.memo or ''} -> {format_milliunits(mutation.amount)}")

    click.echo(f"✅ Synced {len(results)} budgets, {total_updates} updates, {resolver.lookups} price lookups")

    if dry_run:
        click.echo("\n💡 This was a dry run. Nothing was sent to YNAB or saved.")


@tracker.command()
@click.option("--budget", help="Only show this budget")
@click.option("--state-file", help="Override tracker state file")
def show(budget: str | None, state_file: str | None) -> None:
    """
    Show tracked transactions from the state file.

    Example:
      ynab-tracker tracker show --budget 3fa85f64-5717-4562-b3fc-2c963f66afa6
    """
    store = TrackerStateStore(_resolve_state_file(state_file))

    if not store.exists():
        click.echo(store.summary_text())
        return

    try:
        budgets = store.load()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if budget is not None:
        if budget not in budgets:
            raise click.ClickException(f"No tracker state for budget: {budget}")
        budgets = {budget: budgets[budget]}

    click.echo(store.summary_text())
    click.echo(f"State file: {store.path} ({store.size_bytes()} bytes, updated {store.age_days()} days ago)")
    for budget_id, state in budgets.items():
        click.echo(f"\nBudget {budget_id} (server knowledge {state.server_knowledge})")
        for txn_id, tracked in sorted(state.transactions.items()):
            amount = compute_milliunits(tracked.quantity, tracked.price)
            click.echo(
                f"  {txn_id}: {tracked.quantity} {tracked.symbol} @ {tracked.price} = {format_milliunits(amount)}"
            )


@tracker.command()
@click.argument("memo")
@click.option("--amount", type=int, help="Ledger amount in milliunits, to check sign consistency")
def parse(memo: str, amount: int | None) -> None:
    """
    Show what a memo would be tracked as.

    Example:
      ynab-tracker tracker parse 'Buy $AAPL 2.5$' --amount 450000
    """
    parsed = parse_memo(memo)
    if parsed is None:
        click.echo("Not tracked: no $SYMBOL QUANTITY$ token found")
        return

    click.echo(f"Symbol: {parsed.symbol}")
    click.echo(f"Quantity: {parsed.quantity}")

    if amount is not None:
        if is_sign_consistent(parsed.quantity, amount):
            click.echo("Sign: consistent with amount")
        else:
            click.echo("Not tracked: quantity sign does not match amount")


if __name__ == "__main__":
    tracker()
