from __future__ import annotations
import argparse
import sys

import requests
from dotenv import load_dotenv
load_dotenv()

from deck import build_deck, judge
from engine import RoundController
from game_client import GameClient, DEFAULT_BASE_URL
from gestures import GestureInterpreter
from models import Phase, SessionState
from phrases import load_pools

HELP = "> or r: УВБ-76   < or l: нейросеть   <number>: swipe   n: new game   q: quit"

KEY_ALIASES = {
    ">": "ArrowRight", "r": "ArrowRight",
    "<": "ArrowLeft", "l": "ArrowLeft",
}

# -----------------------------
# Pretty printers
# -----------------------------
def print_hud(st: SessionState) -> None:
    print(f"\n[{st.round_index + 1} / {len(st.deck)}]  точность {st.score.percentage}%  серия {st.streak}")
    if st.current:
        print(f"\n    {st.current.text}\n")

def print_final(st: SessionState) -> None:
    print("\n===== Игра завершена =====")
    print(f"{st.score.correct} / {st.score.total} правильных ответов")
    print(f"Точность: {st.score.percentage}%")
    print("=" * 26)

# -----------------------------
# Input -> decision
# -----------------------------
def read_decision(line: str, gestures: GestureInterpreter):
    """Map one input line to True/False, or None when nothing was committed."""
    if line in KEY_ALIASES:
        return gestures.key(KEY_ALIASES[line])
    try:
        distance = float(line)
    except ValueError:
        return None
    gestures.pointer_down(0.0)
    gestures.pointer_move(distance)
    label = gestures.indicator()
    if label:
        print(f"  ({label})")
    decision = gestures.pointer_up()
    if decision is None:
        print("  ...snap back")
    return decision

# -----------------------------
# Interactive play loop
# -----------------------------
def play(controller: RoundController) -> None:
    gestures = GestureInterpreter()
    print(HELP)
    st = controller.restart()
    while True:
        if st.phase is Phase.UNAVAILABLE:
            print(f"⚠️  {st.error}. Type n to retry.")
        elif st.phase is Phase.COMPLETE:
            print_final(st)
            print("n: играть снова, q: выход")
        else:
            print_hud(st)

        line = input("> ").strip()
        if line == "q":
            return
        if line == "n":
            st = controller.restart()
            continue

        decision = read_decision(line, gestures)
        if decision is None:
            continue
        verdict = controller.answer(decision)
        if verdict is not None:
            print("✓" if verdict.correct else "✗")
        elif controller.state.error:
            print(f"⚠️  {controller.state.error}")
        st = controller.state

def local_controller() -> RoundController:
    return RoundController(fetch_deck=lambda: build_deck(*load_pools()), judge=judge)

def remote_controller(base_url: str) -> RoundController:
    client = GameClient(base_url)
    return RoundController(fetch_deck=client.new_session, judge=client.check)

# -----------------------------
# Run server (programmatically)
# -----------------------------
def run_server(port: int, host: str = "127.0.0.1", reload: bool = True) -> None:
    try:
        import uvicorn
    except ImportError:
        print("❌ uvicorn not installed. Run: pip install -e .")
        sys.exit(1)
    uvicorn.run("api:app", host=host, port=port, reload=reload)

# -----------------------------
# Health checker
# -----------------------------
def health_check(base_url: str) -> None:
    print(f"🔎 Checking server at {base_url} ...")
    try:
        r = requests.get(f"{base_url.rstrip('/')}/docs", timeout=10)
        r.raise_for_status()
        print("✅ /docs reachable")

        deck = GameClient(base_url).new_session()
        print(f"✅ JSON API ok ({len(deck)} phrases)")
    except Exception as e:
        print(f"❌ Health check failed: {e}")
        sys.exit(1)

# -----------------------------
# CLI
# -----------------------------
def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="UVB-76: real transmission or neural network?")

    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("serve", help="Start the FastAPI server (uvicorn)")
    ps.add_argument("--port", type=int, default=8000, help="Port to bind")
    ps.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind")
    ps.add_argument("--no-reload", action="store_true", help="Disable auto-reload")

    pp = sub.add_parser("play", help="Play a session in the terminal")
    pp.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL, help="API base URL")
    pp.add_argument("--local", action="store_true", help="Play without a server")

    ph = sub.add_parser("health", help="Check server availability")
    ph.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL, help="API base URL")

    return p.parse_args(argv)

def main(argv=None) -> None:
    args = parse_args(argv)

    if args.cmd == "serve":
        run_server(port=args.port, host=args.host, reload=(not args.no_reload))
        return

    if args.cmd == "play":
        controller = local_controller() if args.local else remote_controller(args.base_url)
        try:
            play(controller)
        except (EOFError, KeyboardInterrupt):
            print()
        return

    if args.cmd == "health":
        health_check(args.base_url)
        return

    print("Unknown command. Try: python main.py --help")
    sys.exit(2)

if __name__ == "__main__":
    main()
