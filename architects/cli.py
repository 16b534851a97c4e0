"""Terminal front end: accounts, board size and mode choice, and playing a game."""

from __future__ import annotations

import argparse
import getpass
import random
import sys
from typing import Sequence

from .board import Color, Difficulty, InitialState
from .game import Game
from .session import GameSession, Situation, edge_appearance
from .users import DEFAULT_PATH, UserDataError, UserInformation, UserStore

MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 20
DEFAULT_GRID_SIZE = 7

# mode name -> (who plays, computer strength, default board size)
MODES: dict[str, tuple[InitialState, Difficulty, int]] = {
    "simple": (InitialState.HUMAN, Difficulty.SIMPLE, DEFAULT_GRID_SIZE),
    "medium": (InitialState.HUMAN, Difficulty.MEDIUM, DEFAULT_GRID_SIZE),
    "hard": (InitialState.HUMAN, Difficulty.HARD, DEFAULT_GRID_SIZE),
    "expert": (InitialState.HUMAN, Difficulty.HARD, MIN_GRID_SIZE),
    "two-players": (InitialState.TWO_PLAYERS, Difficulty.MEDIUM, DEFAULT_GRID_SIZE),
}

_HORIZONTAL = {
    Color.WHITE: "   ",
    Color.BLUE: "bbb",
    Color.ORANGE: "ooo",
    Color.BLACK: "---",
}
_VERTICAL = {
    Color.WHITE: " ",
    Color.BLUE: "b",
    Color.ORANGE: "o",
    Color.BLACK: "|",
}
_OWNER = {
    Color.WHITE: " ",
    Color.BLUE: "B",
    Color.ORANGE: "O",
    Color.BLACK: "X",
}
_PLAYER_NAMES = {Color.BLUE: "蓝方", Color.ORANGE: "橙方"}


def render_board(game: Game) -> str:
    """The board as text: dots are '+', the latest move keeps its colour letter."""
    lines = []
    for x in range(2 * game.height - 1):
        if x % 2 == 0:
            parts = [_HORIZONTAL[edge_appearance(game.edge(x, y))] for y in range(game.width - 1)]
            lines.append("+" + "+".join(parts) + "+")
        else:
            row = (x - 1) // 2
            pieces = []
            for y in range(game.width):
                pieces.append(_VERTICAL[edge_appearance(game.edge(x, y))])
                if y < game.width - 1:
                    pieces.append(f" {_OWNER[game.cell(row, y).color]} ")
            lines.append("".join(pieces))
    return "\n".join(lines)


def parse_edge(text: str) -> tuple[int, int]:
    """Read an edge given as 'row column' or 'row,column'."""
    fields = text.replace(",", " ").split()
    if len(fields) != 2:
        raise ValueError(f"expected two numbers, got {text!r}")
    try:
        return int(fields[0]), int(fields[1])
    except ValueError as exc:
        raise ValueError(f"expected two numbers, got {text!r}") from exc


def validate_grid_size(value: str | int) -> int:
    """The number of dots per side, which must lie between 5 and 20."""
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"grid size must be a number, got {value!r}") from exc
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise ValueError(f"grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}")
    return size


def record_result(
    store: UserStore, user: UserInformation | None, situation: Situation
) -> UserInformation | None:
    """Add a finished game to the user's tally and save it."""
    if user is None:
        return None
    if situation is Situation.DRAW:
        user.draws += 1
    elif situation is Situation.WIN:
        user.wins += 1
    elif situation is Situation.LOSE:
        user.losses += 1
    store.store(user)
    return user


def format_user(user: UserInformation) -> str:
    """The account summary shown on the account page."""
    return (
        f"用户名：{user.username}"
        f"\nUID：{user.uid}"
        f"\n胜利场数：{user.wins}"
        f"\n失败场数：{user.losses}"
        f"\n平局次数：{user.draws}"
    )


def _read_line(prompt: str) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if line == "":
        raise EOFError
    return line.rstrip("\r\n")


def _read_password(prompt: str = "密码: ") -> str:
    if sys.stdin.isatty():
        return getpass.getpass(prompt)
    return _read_line(prompt)


def _grid_size_arg(value: str) -> int:
    try:
        return validate_grid_size(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="architects", description="Dots and boxes.")
    parser.add_argument("--user-file", default=DEFAULT_PATH, help="account data file")
    commands = parser.add_subparsers(dest="command", required=True)

    play = commands.add_parser("play", help="play a game")
    play.add_argument("--mode", choices=sorted(MODES), default="simple")
    play.add_argument("--size", type=_grid_size_arg, default=None)
    play.add_argument("--computer-first", action="store_true")
    play.add_argument("--user", default=None, help="log in to record the result")
    play.add_argument("--seed", type=int, default=None)

    register = commands.add_parser("register", help="create an account")
    register.add_argument("username")

    account = commands.add_parser("account", help="show an account")
    account.add_argument("username")
    return parser


def _login(store: UserStore, username: str) -> UserInformation | None:
    user = store.login(username, _read_password())
    if user is None:
        print("账号或密码不正确。")
    else:
        print("登录成功！")
    return user


def _register(store: UserStore, username: str) -> int:
    password = _read_password()
    if not username or not password:
        print("请填写所有输入框。")
        return 1
    if store.is_username_taken(username):
        print("用户名已存在！")
        return 1
    store.register(username, password)
    print("注册成功！")
    return 0


def _play(store: UserStore, args: argparse.Namespace) -> int:
    user = None
    if args.user is not None:
        user = _login(store, args.user)
        if user is None:
            return 1

    state, difficulty, default_size = MODES[args.mode]
    size = args.size if args.size is not None else default_size
    if args.computer_first and state is not InitialState.TWO_PLAYERS:
        state = InitialState.COMPUTER
    rng = random.Random(args.seed)

    game = Game(size, size, state, difficulty, rng)
    session = GameSession(
        game, 1, on_ai_move=lambda edge: print(f"电脑: {edge.x} {edge.y}")
    )

    while session.situation is Situation.PLAYING:
        print(render_board(game))
        if state is InitialState.TWO_PLAYERS:
            prompt = f"{_PLAYER_NAMES[game.player]} 请输入边 (行 列)，q 退出: "
        else:
            prompt = "请输入边 (行 列)，q 退出: "
        try:
            line = _read_line(prompt)
        except EOFError:
            print()
            return 1
        if line.strip().lower() in {"q", "quit"}:
            return 1
        try:
            x, y = parse_edge(line)
            session.play_edge(x, y)
        except (ValueError, IndexError) as exc:
            print(f"无效的边: {exc}")
            continue
        if game.is_over():
            session.settle()
        else:
            session.next_step()

    print(render_board(game))
    print(session.message)
    if user is not None:
        record_result(store, user, session.situation)
        print(format_user(user))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    store = UserStore(args.user_file)
    try:
        if args.command == "register":
            return _register(store, args.username)
        if args.command == "account":
            user = _login(store, args.username)
            if user is None:
                return 1
            print(format_user(user))
            return 0
        return _play(store, args)
    except EOFError:
        print()
        return 1
    except UserDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())