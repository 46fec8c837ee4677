"""
Command line entry point: hot-seat console game, auto-play, or the web screen.
"""

import argparse
import logging
import sys
from typing import Dict, Optional

from werewolf.core import GameState, WerewolfError, InvalidPlayerCount, Winner, MIN_PLAYERS, MAX_PLAYERS
from werewolf.agents import BaseAgent, DummyAgent
from werewolf.config.game_config import GameConfig
from werewolf.config.config_loader import load_config
from werewolf.game import WerewolfGame


def setup_logging(config: GameConfig) -> logging.Logger:
    """Configure the package logger from the config's log level."""
    logger = logging.getLogger("werewolf")
    logger.setLevel(config.log_level)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(console)

    return logger


def run_auto_game(game: WerewolfGame, player_count: Optional[int] = None) -> Optional[Winner]:
    """
    Play a full game with a DummyAgent in every seat.

    Returns the winner, or None if max_rounds passed without one.
    """
    state = game.new_game(player_count)
    agents: Dict[int, BaseAgent] = {p.id: DummyAgent(p, game.config) for p in state.players}

    while not state.ended:
        if state.round > game.config.max_rounds:
            print(f"\nNo winner after {game.config.max_rounds} rounds, stopping.")
            return None

        prompt = game.prompt()
        if prompt is None:
            break

        actor = prompt["actor"]
        agent = agents[actor]
        context = agent.build_context(state, prompt["options"])
        target = agent.decide(context)
        if prompt["kind"] == "night_action":
            if target is None:
                game.skip()
            else:
                game.submit_night_action(actor, target)
        else:
            game.vote(actor, target)

    return state.winner


def run_console_game(game: WerewolfGame, player_count: Optional[int] = None) -> Optional[Winner]:
    """Hot-seat game on one terminal: each player takes the keyboard in turn."""
    state = game.new_game(player_count)

    print("\nPass the keyboard around so everyone can see their role privately.")
    for player in state.players:
        card = game.role_card(player.id)
        input(f"\nPlayer #{card['number']}, press Enter to see your role...")
        print(f"  {card['icon']} {card['name']}: {card['description']}")
        input("  Press Enter and hand over the keyboard...")
        print("\n" * 40)

    while not state.ended:
        prompt = game.prompt()
        if prompt is None:
            break
        _print_board(game)

        if prompt["kind"] == "night_action":
            label = prompt["role"].title()
            choice = input(
                f"{label} #{prompt['number']}, choose a player number (or 's' to skip): "
            ).strip().lower()
            if choice == "s":
                game.skip()
                continue
        else:
            choice = input(f"Player #{prompt['number']}, vote for player number: ").strip()

        try:
            if choice:
                game.select_target(int(choice) - 1)
            result = game.confirm()
        except ValueError:
            print("Please type a player number.")
            continue
        except WerewolfError as e:
            print(f"❌ {e.message}")
            continue

        if not result.success:
            print(f"❌ {result.message}")

    _print_game_summary(state)
    return state.winner


def _print_board(game: WerewolfGame) -> None:
    snapshot = game.snapshot()
    print("\n" + "-" * 60)
    print(f"{snapshot['phase'].upper()} - round {snapshot['round']}  "
          f"(werewolves alive: {snapshot['alive_werewolves']}, others alive: {snapshot['alive_villagers']})")
    seats = []
    for player in snapshot["players"]:
        if player["alive"]:
            seats.append(f"#{player['number']}")
        else:
            seats.append(f"#{player['number']} {player['icon'] or '💀'}")
    print("  ".join(seats))
    print("-" * 60)


def _print_game_summary(state: GameState) -> None:
    """Print a nicely formatted game summary."""
    print("\n" + "=" * 60)
    if state.winner == Winner.WEREWOLVES:
        print("🐺 THE WEREWOLVES WIN! 🐺")
    elif state.winner == Winner.VILLAGERS:
        print("🎉 THE VILLAGERS WIN! 🎉")
    else:
        print("Game ended without a winner")
    print("=" * 60)
    print(f"Rounds played: {state.round}")
    for player in state.players:
        status = "alive" if player.alive else "eliminated"
        print(f"  {player.role.icon} Player #{player.number}: {player.role.display_name} ({status})")


def main(argv=None) -> int:
    """Entry point for running a game."""
    parser = argparse.ArgumentParser(
        description="Play Werewolf on one shared screen",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --players 8               # Hot-seat game in the terminal
  python main.py --auto --seed 42          # Let dummy agents play a full game
  python main.py --web --port 8080         # Serve the shared screen over HTTP
  python main.py --config configs/party.yaml
        """
    )
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="Path to YAML configuration file (default: use default config)")
    parser.add_argument("--players", "-n", type=int, default=None,
                        help=f"Number of players, {MIN_PLAYERS}-{MAX_PLAYERS} (overrides config)")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Random seed for reproducible role assignment and auto-play")
    parser.add_argument("--auto", action="store_true",
                        help="Let dummy agents play every seat")
    parser.add_argument("--web", action="store_true",
                        help="Start the web server instead of the console game")
    parser.add_argument("--host", type=str, default=None, help="Host to bind to (web mode)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port for web server (web mode)")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.players is not None:
        config.player_count = args.players
    if args.seed is not None:
        config.random_seed = args.seed
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port

    setup_logging(config)

    try:
        WerewolfGame.role_preview(config.player_count)
    except InvalidPlayerCount as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 2

    if args.web:
        from werewolf.web.game_server import GameServer
        GameServer(config).start()
        return 0

    game = WerewolfGame(config)
    print("Werewolf")
    print("=" * 60)
    for role, count in WerewolfGame.role_preview(config.player_count).items():
        print(f"  {role.title()}: {count}")
    print("=" * 60)

    if args.auto:
        winner = run_auto_game(game)
        _print_game_summary(game.game_state)
    else:
        winner = run_console_game(game)

    return 0 if winner is not None else 1


if __name__ == "__main__":
    sys.exit(main())
