"""
Interactive menu driving a ``TallyService``.

Example:
    python -m ballotbox --store memory
"""

import click

from .ballots import Tally, Vote
from .counting import Majority, Plurality, get_strategy
from .listeners import AuditListener, LoggingListener
from .service import AlreadyVoted, TallyService
from .stores import MEMORY, create_store

MENU = """
--- Main menu ---
1. Vote
2. Show results
3. Reset
4. Statistics
5. Quit"""

def cast_vote(service: TallyService) -> None:
    voter_id = click.prompt("Voter id", default="", show_default=False).strip()
    candidate_id = click.prompt("Candidate id", default="", show_default=False).strip()
    try:
        service.cast(Vote(voter_id, candidate_id))
    except (ValueError, AlreadyVoted) as e:
        click.echo(f"Error: {e}")
    else:
        click.echo("Vote recorded.")

def display_results(results: Tally, strategy_name: str) -> None:
    click.echo(f"\n=== Results ({strategy_name}) ===")
    if not results:
        click.echo("No vote recorded.")
        return

    total = results.total()
    for candidate_id, votes in results.items():
        click.echo(f"  {candidate_id}: {votes} votes ({votes * 100 / total:.1f}%)")
    click.echo(f"Total votes: {total}")

def show_results(service: TallyService) -> None:
    name = click.prompt("Counting method",
                        type=click.Choice(["plurality", "majority"], case_sensitive=False))
    strategy = get_strategy(name)
    results = service.count(strategy)
    display_results(results, strategy.name)

    if isinstance(strategy, Plurality):
        winner = strategy.get_winner(results)
        click.echo(f"Winner (plurality): {winner or 'none'}")
    elif isinstance(strategy, Majority):
        winner = strategy.get_majority_winner(results, service.total_votes)
        click.echo(f"Winner (majority > 50%): {winner or 'none (no absolute majority)'}")

def show_statistics(service: TallyService) -> None:
    stats = service.statistics()
    click.echo("\n=== Statistics ===")
    click.echo(f"Total votes: {stats['total_votes']}")
    click.echo(f"Unique voters: {stats['unique_voters']}")
    click.echo(f"Active listeners: {stats['listener_count']}")

@click.command()
@click.option("--store", "store_type", default=MEMORY, show_default=True,
              help="Type of the vote store")
def main(store_type):
    """Casts and counts votes from an interactive menu."""
    try:
        store = create_store(store_type)
    except (ValueError, NotImplementedError) as e:
        raise click.BadParameter(str(e), param_hint="--store") from e

    service = TallyService(store)
    service.add_listener(LoggingListener())
    service.add_listener(AuditListener())

    click.echo("=== Ballot box ===")
    while True:
        click.echo(MENU)
        choice = click.prompt("Your choice", default="", show_default=False).strip()

        if choice == "1":
            cast_vote(service)
        elif choice == "2":
            show_results(service)
        elif choice == "3":
            service.reset()
            click.echo("All votes were cleared.")
        elif choice == "4":
            show_statistics(service)
        elif choice == "5":
            click.echo("Bye.")
            break
        else:
            click.echo("Invalid option.")

if __name__ == "__main__":
    main()
