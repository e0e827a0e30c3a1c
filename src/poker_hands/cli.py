"""Command-line interface for evaluating and comparing poker hands."""
import logging
import random
import sys

import click

from poker_hands.config.loader import LOG_LEVELS, RoundSettings
from poker_hands.core.card import parse_cards
from poker_hands.errors import PokerHandError
from poker_hands.evaluation.comparator import compare_hands
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.hand_description import describe_hand_detailed
from poker_hands.evaluation.selector import best_hand
from poker_hands.game.holdem_round import HoldemRound

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Send log records to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


def _parse_hand(text: str) -> Hand:
    return Hand(parse_cards(text))


@click.group()
@click.option('--log-level', type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
              default=None, help='Logging level (overrides the config file)')
@click.pass_context
def cli(ctx, log_level):
    """Poker hand evaluator."""
    ctx.ensure_object(dict)
    ctx.obj['log_level'] = log_level.upper() if log_level else None
    if log_level:
        setup_logging(log_level.upper())


@cli.command()
@click.argument('cards', nargs=-1, required=True)
def best(cards):
    """Show the best five-card hand out of five or more CARDS, e.g. AS KS QS JS TS 2H 3D."""
    try:
        hand = best_hand(parse_cards(' '.join(cards)))
    except PokerHandError as e:
        raise click.ClickException(str(e))
    click.echo(f"{describe_hand_detailed(hand)}: {hand}")


@cli.command()
@click.argument('first')
@click.argument('second')
def compare(first, second):
    """Compare two five-card hands given as 'AS, AH, KS, KH, 2C'."""
    try:
        hand1 = _parse_hand(first)
        hand2 = _parse_hand(second)
    except PokerHandError as e:
        raise click.ClickException(str(e))

    result = compare_hands(hand1, hand2)
    if result > 0:
        click.echo(f"First hand wins: {describe_hand_detailed(hand1)}")
    elif result < 0:
        click.echo(f"Second hand wins: {describe_hand_detailed(hand2)}")
    else:
        click.echo(f"Tie: {describe_hand_detailed(hand1)}")


@cli.command()
@click.argument('hand')
def describe(hand):
    """Describe a single five-card HAND."""
    try:
        parsed = _parse_hand(hand)
    except PokerHandError as e:
        raise click.ClickException(str(e))
    click.echo(describe_hand_detailed(parsed))


@cli.command()
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with players, seed and logLevel')
@click.option('--player', 'players', multiple=True, help='Player name (repeatable)')
@click.option('--seed', type=int, default=None, help='Seed for a repeatable shuffle')
@click.pass_context
def deal(ctx, config_path, players, seed):
    """Deal a Hold'em round to the river and show the winner."""
    overrides = {}
    if players:
        overrides['players'] = list(players)
    if seed is not None:
        overrides['seed'] = seed

    try:
        if config_path:
            settings = RoundSettings.from_file(config_path, overrides)
        else:
            settings = RoundSettings.from_dict(overrides)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load settings: {e}")
        raise click.ClickException(f"Could not load settings: {e}")

    if ctx.obj.get('log_level') is None:
        setup_logging(settings.log_level)

    try:
        game = HoldemRound(settings.players, rng=random.Random(settings.seed))
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(str(game))
    game.deal_board()
    click.echo('')
    click.echo(str(game))

    result = game.winners()
    click.echo('')
    for hand_result in result.results:
        click.echo(str(hand_result))
    names = ', '.join(player.name for player in result.winners)
    label = 'Split pot' if result.split else 'Winner'
    click.echo(f"\n{label}: {names}")


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
