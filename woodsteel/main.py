"""Main entry point for Wood & Steel."""

import logging
import os
import sys

from dotenv import load_dotenv

# Adjacent starting city pairs handed out in the demo, one per seat
DEMO_STARTING_PAIRS = [
    ["New York", "Philadelphia"],
    ["Boston", "Portland ME"],
    ["Washington", "Norfolk"],
    ["Raleigh", "Charleston"],
    ["Montreal", "Quebec City"],
    ["Savannah", "Charleston"],
]

DEMO_ROUNDS = 4


def setup_logging() -> None:
    """Configure logging for the application."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _get_seed() -> int | None:
    seed = os.getenv("WOODSTEEL_SEED")
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-integer WOODSTEEL_SEED: {seed}")
        return None


def main() -> None:
    """List saved games in the configured database."""
    load_dotenv()
    setup_logging()
    logger = logging.getLogger(__name__)

    from woodsteel.database import GameManager, get_session

    session = next(get_session())
    try:
        manager = GameManager(session)
        games = manager.list_games()
    finally:
        session.close()

    if not games:
        logger.info("No saved games. Run 'python -m woodsteel.main demo' to play one.")
        return

    for game in games:
        print(
            f"{game['code']}  {game['game_mode']:<8} {game['phase']:<20} "
            f"turn {game['turn']:<3} players {game['num_players']}  "
            f"{game['last_modified']}"
        )


def run_demo() -> None:
    """Play a short seeded hotseat game."""
    load_dotenv()
    setup_logging()
    logger = logging.getLogger(__name__)

    from woodsteel.database import GameManager, get_session
    from woodsteel.engine.contracts import money_value
    from woodsteel.engine.game_engine import GameEngine
    from woodsteel.engine.randomness import GameRandom
    from woodsteel.models.game_state import GamePhase

    print("🚂 Wood & Steel Demo 🚂")
    print("=" * 40)

    num_players = int(os.getenv("WOODSTEEL_PLAYERS", "3"))
    rng = GameRandom(_get_seed())
    engine = GameEngine(num_players=num_players, rng=rng)

    session = None
    if os.getenv("DATABASE_PATH"):
        session = next(get_session())
        manager = GameManager(session, rng)
        code = manager.create_new_game(
            num_players=num_players, state=engine.state, ctx=engine.ctx
        )
        engine.persistence = manager
        print(f"Game code: {code}")

    print(f"Independent railroads: {len(engine.state.independent_railroads)}")
    for name, railroad in engine.state.independent_railroads.items():
        print(f"  {name}: {', '.join(railroad.routes)}")
    print()

    try:
        # Setup: each seat picks starting cities
        seat = 0
        while engine.phase == GamePhase.SETUP and seat < len(DEMO_STARTING_PAIRS):
            result = engine.generate_starting_contract(DEMO_STARTING_PAIRS[seat])
            seat += 1
            if not result["success"]:
                logger.warning(f"Starting contract failed: {result['error']}")
                continue
            print(result["message"])

        if engine.phase != GamePhase.PLAY:
            logger.error("Setup did not complete")
            return

        for _ in range(DEMO_ROUNDS):
            print(f"\n--- Round {engine.ctx.turn} ---")
            for _ in range(num_players):
                player = engine.get_current_player()
                offers = engine.get_private_contract_offers()
                print(
                    f"{player.name} offers: "
                    + ", ".join(f"{o.commodity} to {o.destination_key}" for o in offers)
                )

                result = engine.generate_private_contract()
                if result["success"]:
                    contract = result["contract"]
                    engine.toggle_contract_fulfilled(contract.id)
                    print(
                        f"  fulfilled {contract.commodity} to {contract.destination_key} "
                        f"(${money_value(contract):,})"
                    )

                result = engine.generate_market_contract()
                if result["success"]:
                    print(f"  {result['message']}")

                engine.end_turn()

            held = sum(len(r.routes) for r in engine.state.independent_railroads.values())
            print(f"Independent railroads hold {held} routes")

        print()
        for player in engine.state.players:
            print(f"{player.name}: {', '.join(player.active_cities)}")
    finally:
        if session is not None:
            session.close()


if __name__ == "__main__":
    # Check if demo mode
    if len(sys.argv) > 1 and sys.argv[1] == "demo":
        run_demo()
    else:
        main()
