import logging
import sys
import argparse

from core.config_loader import load_config
from core.matching import MatchingService, MatchStatus
from database.init_db import init_db
from database.uow import matching_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid top value: {value!r}")
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"top must be positive, got {parsed}")
    return parsed


def run_event(service: MatchingService, event_id: str, top) -> int:
    outcome = service.rank_volunteers_for_event(event_id, top)
    if outcome.status != MatchStatus.OK:
        logger.error(f"Cannot rank event {event_id!r}: {outcome.message}")
        return 2 if outcome.status == MatchStatus.INVALID_INPUT else 1

    for rank, match in enumerate(outcome.matches, start=1):
        print(f"{rank:>3}. {match.volunteer.full_name} ({match.volunteer.volunteer_id}) score={match.score}")
        for reason in match.reasons:
            print(f"       - {reason}")
    return 0


def run_global(service: MatchingService, top) -> int:
    pairs = service.rank_top_pairs_globally(top)
    if not pairs:
        print("No volunteer/event pairs with a positive score.")
    for rank, pair in enumerate(pairs, start=1):
        print(
            f"{rank:>3}. {pair.volunteer.full_name} -> {pair.event.name} "
            f"({pair.event.event_date:%Y-%m-%d}) score={pair.score}"
        )
        for reason in pair.reasons:
            print(f"       - {reason}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Volunteer matching driver")
    parser.add_argument('--mode', type=str, choices=['event', 'global'], default='global',
                        help='Ranking mode: global (default) or event')
    parser.add_argument('--event-id', type=str, default=None,
                        help='Event to rank volunteers for (event mode)')
    parser.add_argument('--top', type=_positive_int, default=None,
                        help='Maximum results (defaults from config.yaml)')
    parser.add_argument('--config', type=str, default="config.yaml")
    args = parser.parse_args(argv)

    if args.mode == 'event' and args.event_id is None:
        parser.error("--event-id is required in event mode")

    config = load_config(args.config)
    init_db()

    with matching_uow() as source:
        service = MatchingService(source, config.matching)
        if args.mode == 'event':
            return run_event(service, args.event_id, args.top)
        return run_global(service, args.top)


if __name__ == "__main__":
    sys.exit(main())
