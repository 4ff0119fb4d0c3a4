from typing import List, Sequence

from app.schemas.game import BaseGame, Expansion, Game

COLUMNS = ("ID", "Name", "Year", "Publisher", "Type")


def type_label(game: Game) -> str:
    match game:
        case BaseGame():
            return "Base Game"
        case Expansion():
            return "Expansion"
    raise TypeError(f"Not a game: {game!r}")


def game_row(game: Game) -> List[str]:
    return [
        game.id,
        game.name,
        str(game.release_year) if game.release_year is not None else "",
        game.publisher or "",
        type_label(game),
    ]


def format_games_table(games: Sequence[Game]) -> str:
    if not games:
        return "No games found."

    rows = [list(COLUMNS)] + [game_row(game) for game in games]
    widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]

    lines = []
    for index, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if index == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines)
